# tests/core/test_checks_manager.py
import pytest

from checker.managers.checks_manager import load_checks


def test_load_checks_keeps_file_order(write_checks):
    path = write_checks(["h1#title", "div.container", "a"])
    assert load_checks(path) == ["h1#title", "div.container", "a"]


def test_load_empty_list(write_checks):
    assert load_checks(write_checks([])) == []


def test_load_checks_with_bom(tmp_path):
    path = tmp_path / "checks.json"
    path.write_bytes("\ufeff[\"h1\"]".encode("utf-8"))
    assert load_checks(path) == ["h1"]


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_checks(tmp_path / "nope.json")


def test_invalid_json_raises_value_error(tmp_path):
    path = tmp_path / "checks.json"
    path.write_text("[\"h1\", ", encoding="utf-8")
    with pytest.raises(ValueError, match="invalid JSON"):
        load_checks(path)


@pytest.mark.parametrize("payload", [{"h1": True}, "h1", [1, 2], ["h1", None]])
def test_wrong_shape_raises_value_error(write_checks, payload):
    with pytest.raises(ValueError, match="array of selector strings"):
        load_checks(write_checks(payload))
