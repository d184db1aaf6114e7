from urllib.parse import urlparse

from bs4 import BeautifulSoup


def extract_domain(url: str) -> str:
    """Host name of `url`, or `url` itself when it has none."""
    parsed = urlparse(url if "://" in url else f"https://{url}")
    return parsed.hostname or url


class HtmlDocument:
    """
    Read-only view over a parsed page.

    Lookups take a CSS selector and only ever look at the first matching
    element. A lookup that finds nothing returns None, never an empty string,
    so callers can tell a missing tag from an empty one.
    """

    def __init__(self, html: str, url: str):
        # html.parser tolerates unclosed tags, missing doctype and duplicates
        self._soup = BeautifulSoup(html or "", "html.parser")
        self.url = url
        self.domain = extract_domain(url)

    def text(self, selector: str) -> str | None:
        """Stripped text content of the first element matching `selector`."""
        tag = self._soup.select_one(selector)
        if tag is None:
            return None
        return tag.get_text().strip()

    def attr(self, selector: str, attribute: str) -> str | None:
        """Value of `attribute` on the first element matching `selector`."""
        tag = self._soup.select_one(selector)
        if tag is None:
            return None
        value = tag.get(attribute)
        if isinstance(value, list):  # multi-valued attributes such as rel
            value = " ".join(value)
        return value
