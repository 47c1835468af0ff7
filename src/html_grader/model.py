# src/html_grader/model.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from html_grader.core.managers.config_manager import ConfigManager


class SessionSettings(BaseModel):
    time_out: float = 30.0
    max_redirects: int = 10


class GraderSettings(BaseModel):
    """
    Explicit, typed view of the configuration a single grading run needs.
    Built once in the entry point and handed down; nothing below the CLI
    reads the config singleton.
    """
    checks_file: str = "checks.json"
    parser_features: str = "html.parser"
    chrome_version: str = "120.0.0.0"
    session: SessionSettings = Field(default_factory=SessionSettings)

    @classmethod
    def from_config(cls, manager: Optional[ConfigManager] = None) -> "GraderSettings":
        manager = manager or ConfigManager()
        defaults = cls()
        return cls(
            checks_file=manager.get_nested("defaults.checks_file", defaults.checks_file),
            parser_features=manager.get_nested("parser.features", defaults.parser_features),
            chrome_version=manager.get_nested("user_agent.chrome_version", defaults.chrome_version),
            session=SessionSettings(
                time_out=manager.get_nested("session.time_out", defaults.session.time_out),
                max_redirects=manager.get_nested("session.max_redirects", defaults.session.max_redirects),
            ),
        )
