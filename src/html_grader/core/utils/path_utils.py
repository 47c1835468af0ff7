# src/html_grader/core/utils/path_utils.py
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving important package and input paths.
    """

    # --- Package specific paths

    @staticmethod
    def get_package_root() -> Path:
        """Returns the absolute path of the installed html_grader package."""
        return Path(__file__).resolve().parent.parent.parent

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_package_root() / "settings.json"

    # --- Helper methods ---

    @staticmethod
    def resolve_input(path: str, base_dir: Optional[Path] = None) -> Path:
        """
        Resolves a user supplied path against base_dir (defaults to the CWD).
        Absolute paths are returned unchanged.
        """
        candidate = Path(path).expanduser()
        if candidate.is_absolute():
            return candidate
        return (base_dir or Path.cwd()) / candidate

    @staticmethod
    def input_exists(path: str, base_dir: Optional[Path] = None) -> bool:
        """True if the path points to an existing regular file."""
        resolved = PathUtils.resolve_input(path, base_dir)
        exists = resolved.is_file()
        if not exists:
            logger.debug("Input file not found: %s", resolved)
        return exists
