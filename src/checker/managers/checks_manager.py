# src/checker/managers/checks_manager.py
import json
import logging
from pathlib import Path
from typing import List

from pydantic import ValidationError

from checker.model import CheckList

logger = logging.getLogger(__name__)


def load_checks(path: str | Path) -> List[str]:
    """
    Loads the selector list from a JSON checks file.

    Raises:
        FileNotFoundError: the file does not exist.
        ValueError: the file is not a JSON array of strings.
    """
    checks_path = Path(path)
    if not checks_path.is_file():
        raise FileNotFoundError(str(path))

    raw = checks_path.read_text(encoding="utf-8-sig")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"invalid JSON ({e.msg} at line {e.lineno}, column {e.colno})") from e

    try:
        checks = CheckList.model_validate(data).root
    except ValidationError as e:
        raise ValueError("expected a JSON array of selector strings") from e

    logger.debug("Loaded %d checks from %s", len(checks), checks_path)
    return checks
