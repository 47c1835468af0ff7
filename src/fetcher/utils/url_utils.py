# src/fetcher/utils/url_utils.py
from urllib.parse import urlparse


class UrlUtils:
    """A collection of static methods for URL parsing."""

    @staticmethod
    def is_http_url(url: str) -> bool:
        """
        Checks if a URL is an absolute http(s) URL with a host.
        """
        try:
            parsed_url = urlparse(url)
        except ValueError:
            return False
        return parsed_url.scheme in ('http', 'https') and bool(parsed_url.hostname)
