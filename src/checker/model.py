# src/checker/model.py
from typing import List

from pydantic import RootModel


class CheckList(RootModel[List[str]]):
    """The checks file: a flat JSON array of CSS selector strings."""


class FetchError(Exception):
    """Raised when the remote document could not be retrieved."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason
