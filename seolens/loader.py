# seolens/loader.py
import logging
import re
from urllib.parse import urlparse

import requests
from requests.adapters import HTTPAdapter
from urllib3.exceptions import ReadTimeoutError
from urllib3.util.retry import Retry

from .config import DEFAULT_CONFIG
from .errors import (
    BlockedError,
    ConnectionFailedError,
    EmptyResponseError,
    FetchTimeoutError,
    InvalidUrlError,
    NotFoundError,
    UnexpectedFetchError,
)

logger = logging.getLogger(__name__)

_SCHEME_RE = re.compile(r"^[a-z][a-z0-9+.\-]*://", re.I)
_HTML_CONTENT_TYPES = ("html", "xml")


def normalize_url(raw_url: str) -> str:
    """
    Resolves user input such as "example.com" into an absolute URL.

    A missing scheme defaults to https. Anything that is not an http(s) URL
    with a host name raises InvalidUrlError.
    """
    url = (raw_url or "").strip()
    if not url:
        raise InvalidUrlError("Invalid URL format: empty URL", url=raw_url)
    if not _SCHEME_RE.match(url):
        url = "https://" + url
    try:
        parsed = urlparse(url)
        parsed.port  # raises ValueError on a malformed port
    except ValueError as e:
        raise InvalidUrlError(f"Invalid URL format: {raw_url}. {e}", url=raw_url) from e
    if parsed.scheme.lower() not in ("http", "https") or not parsed.hostname or " " in parsed.netloc:
        raise InvalidUrlError(f"Invalid URL format: {raw_url}. Please enter a valid website address.", url=raw_url)
    return url


def is_blocked_host(host: str, blocked_hosts) -> bool:
    host = host.lower().rstrip(".")
    return any(host == blocked or host.endswith("." + blocked) for blocked in blocked_hosts)


def _is_read_timeout(exc: requests.exceptions.ConnectionError) -> bool:
    # Exhausted read retries surface as ConnectionError wrapping a MaxRetryError
    reason = getattr(exc.args[0], "reason", None) if exc.args else None
    return isinstance(reason, ReadTimeoutError)


class DocumentLoader:
    """Retrieves the raw HTML of a single page."""

    def __init__(self, config=None):
        self.config = config if config else {}
        self.global_config = self.config.get("Global", DEFAULT_CONFIG["Global"])
        loader_config = self.config.get("Loader", DEFAULT_CONFIG["Loader"])
        self.blocked_hosts = [h.lower() for h in loader_config.get("blocked_hosts", [])]
        self.timeout = float(self.global_config.get("request_timeout", 15))

        self.headers = {
            "User-Agent": self.global_config.get("user_agent", DEFAULT_CONFIG["Global"]["user_agent"]),
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
            "Accept-Language": self.global_config.get("accept_language", "en-US,en;q=0.5"),
        }
        self.session = requests.Session()
        retries_total = int(self.global_config.get("http_retries_total", 2))
        if retries_total > 0:
            retry_cfg = Retry(
                total=retries_total,
                connect=retries_total,
                # Read timeouts are final; only connect failures and listed statuses retry
                read=0,
                backoff_factor=float(self.global_config.get("http_backoff_factor", 0.2)),
                status_forcelist=self.global_config.get("http_status_forcelist", [429, 500, 502, 503, 504]),
                allowed_methods={"HEAD", "GET", "OPTIONS"},
                raise_on_status=False,
            )
            adapter = HTTPAdapter(max_retries=retry_cfg)
            self.session.mount("http://", adapter)
            self.session.mount("https://", adapter)
        self.session.headers.update(self.headers)

    def fetch_document(self, raw_url: str) -> str:
        """
        Fetches the HTML of `raw_url`.

        Args:
            raw_url (str): A URL or bare host name as typed by the user.

        Returns:
            str: The page's HTML.

        Raises:
            FetchError: One of the subclasses in seolens.errors.
        """
        url = normalize_url(raw_url)
        domain = urlparse(url).hostname
        if is_blocked_host(domain, self.blocked_hosts):
            raise BlockedError(
                f"Unable to analyze {domain}. This website blocks external requests. Please try a different URL.",
                url=url,
            )

        logger.info("Fetching %s (timeout %.0fs)", url, self.timeout)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise FetchTimeoutError(
                "Request timeout: The website took too long to respond. Please try again later.", url=url
            ) from e
        except (requests.exceptions.InvalidURL, requests.exceptions.MissingSchema, requests.exceptions.InvalidSchema) as e:
            raise InvalidUrlError(f"Invalid URL format: {url}. Please enter a valid website address.", url=url) from e
        except requests.exceptions.ConnectionError as e:
            if _is_read_timeout(e):
                raise FetchTimeoutError(
                    "Request timeout: The website took too long to respond. Please try again later.", url=url
                ) from e
            logger.warning("Connection to %s failed: %s", url, e)
            raise ConnectionFailedError(
                "Connection error: Unable to access the website. This could be due to a secure "
                "connection issue or the site may be blocking requests.",
                url=url,
            ) from e
        except requests.exceptions.RequestException as e:
            logger.warning("Request for %s failed: %s", url, e)
            raise UnexpectedFetchError(f"Unknown error occurred while fetching the website: {e}", url=url) from e

        return self._read_html(resp, url, domain)

    def _read_html(self, resp: requests.Response, url: str, domain: str) -> str:
        if resp.status_code == 403:
            raise BlockedError(f"Access forbidden: The website {domain} doesn't allow external requests.", url=url)
        if resp.status_code == 404:
            raise NotFoundError(f"Page not found: The URL {url} doesn't exist.", url=url)
        if 400 <= resp.status_code < 500:
            raise NotFoundError(f"Failed to fetch website: {resp.status_code} {resp.reason}", url=url)
        if not resp.ok:
            raise UnexpectedFetchError(f"Failed to fetch website: {resp.status_code} {resp.reason}", url=url)

        content_type = (resp.headers.get("Content-Type") or "").lower()
        if content_type and not any(t in content_type for t in _HTML_CONTENT_TYPES):
            raise EmptyResponseError(f"Received non-HTML response from website ({content_type})", url=url)
        html = resp.text
        if not html or not html.strip():
            raise EmptyResponseError("Received empty response from website", url=url)
        logger.debug("Fetched %d characters from %s", len(html), url)
        return html
