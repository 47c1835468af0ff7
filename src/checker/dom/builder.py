# src/checker/dom/builder.py
import logging

from bs4 import BeautifulSoup

from .models import HTMLDocument

logger = logging.getLogger(__name__)


class DOMBuilder:
    """
    Builder responsible for parsing raw HTML into a queryable HTMLDocument.
    """

    def __init__(self, features: str = "html.parser"):
        self.features = features

    def parse_doc(self, html: str | bytes, source: str = "<memory>") -> HTMLDocument:
        """
        Parses raw HTML content into an HTMLDocument.

        Args:
            html (str | bytes): The raw HTML. Bytes are handed to BeautifulSoup
                                so it can sniff the encoding itself.
            source (str): File path or URL the HTML came from, for logging.

        Returns:
            HTMLDocument: The parsed document.
        """
        if isinstance(html, str):
            # Basic cleanup of potentially dirty HTML (e.g., BOM)
            html = html.replace('\ufeff', '')

        soup = BeautifulSoup(html or "", self.features)
        logger.debug("Parsed %s with '%s'.", source, self.features)
        return HTMLDocument(source=source, soup=soup)
