# src/html_grader/core/managers/config_manager.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from html_grader.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


def _read_settings(settings_path: Path) -> Dict[str, Any]:
    """Reads settings.json; a missing or broken file yields an empty config."""
    if not settings_path.exists():
        logger.warning("settings.json not found at %s. Using built-in defaults.", settings_path)
        return {}
    try:
        with open(settings_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Failed to load %s: %s", settings_path, e, exc_info=True)
        return {}
    if not isinstance(data, dict):
        logger.error("%s must hold a JSON object, got %s.", settings_path, type(data).__name__)
        return {}
    return data


class ConfigManager:
    """
    Process-wide holder of the grader's settings.

    Values come from the packaged settings.json; command line flags such as
    --log-level are written over them with set_nested() before the run starts.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._config = {}
            cls._instance.reset()
        return cls._instance

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """Looks up a dotted key such as 'session.time_out'."""
        node: Any = self._config
        for key in key_path.split('.'):
            if not isinstance(node, dict) or key not in node:
                return default
            node = node[key]
        return default if node is None else node

    def set_nested(self, key_path: str, value: Any) -> bool:
        """
        Overrides a dotted key in memory. A value replacing an existing one is
        coerced to that value's type, so '20' stays an int for session.max_redirects.
        """
        *parents, leaf = key_path.split('.')
        node = self._config
        for key in parents:
            node = node.setdefault(key, {})
            if not isinstance(node, dict):
                logger.error("Cannot set '%s': '%s' is not a section.", key_path, key)
                return False

        current = node.get(leaf)
        if current is not None and not isinstance(value, type(current)):
            try:
                value = type(current)(value)
            except (ValueError, TypeError):
                logger.warning("Keeping '%s' override as %s.", key_path, type(value).__name__)

        node[leaf] = value
        logger.debug("Override applied: %s = %r", key_path, value)
        return True

    def reset(self):
        """Drops all overrides and reloads settings.json."""
        self._config = _read_settings(PathUtils.get_settings_file())
        logger.debug("Settings loaded (%d sections).", len(self._config))


config_manager = ConfigManager()
