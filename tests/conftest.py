# tests/conftest.py
import json
from pathlib import Path

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def write_checks(tmp_path):
    """Writes a list of selectors to <tmp>/checks.json and returns the path."""
    def _write(checks, name="checks.json"):
        path = tmp_path / name
        path.write_text(json.dumps(checks), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def write_html(tmp_path):
    def _write(html, name="index.html"):
        path = tmp_path / name
        path.write_text(html, encoding="utf-8")
        return path
    return _write
