# src/checker/dom/models.py
from bs4 import BeautifulSoup
from pydantic import BaseModel, ConfigDict


class HTMLDocument(BaseModel):
    """
    Represents one parsed HTML payload.

    The document is built once per run, queried once per selector and then
    discarded; it is never modified after parsing.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    source: str
    soup: BeautifulSoup

    def count(self, selector: str) -> int:
        """
        Returns the number of elements matching a CSS selector.

        Raises soupsieve.SelectorSyntaxError for malformed selectors.
        """
        return len(self.soup.select(selector))
