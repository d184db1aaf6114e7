from ..document import HtmlDocument
from ..models import Finding, STATUS_ERROR, STATUS_SUCCESS, STATUS_WARNING

CANONICAL_URL = "Canonical URL"
ROBOTS = "Robots"
VIEWPORT = "Viewport"

DEFAULT_ROBOTS = "index, follow (default)"
BLOCKING_DIRECTIVES = ("noindex", "nofollow")


def check_canonical_tag(document: HtmlDocument) -> Finding:
    href = document.attr('link[rel="canonical"]', "href")
    if href is None:
        return Finding(name=CANONICAL_URL, status=STATUS_ERROR, message="Missing canonical URL")
    return Finding(name=CANONICAL_URL, value=href, status=STATUS_SUCCESS)


def check_meta_robots(document: HtmlDocument) -> Finding:
    content = document.attr('meta[name="robots"]', "content")
    if content is None:
        # Search engines index and follow unless told otherwise
        return Finding(name=ROBOTS, value=DEFAULT_ROBOTS, status=STATUS_SUCCESS)
    if any(directive in content for directive in BLOCKING_DIRECTIVES):
        return Finding(
            name=ROBOTS,
            value=content,
            status=STATUS_WARNING,
            message="Page may not be fully indexed by search engines",
        )
    return Finding(name=ROBOTS, value=content, status=STATUS_SUCCESS)


def read_viewport(document: HtmlDocument) -> str | None:
    return document.attr('meta[name="viewport"]', "content")


def check_viewport_meta(document: HtmlDocument) -> Finding:
    viewport = read_viewport(document)
    if viewport is None:
        return Finding(name=VIEWPORT, status=STATUS_ERROR, message="Missing viewport meta tag")
    return Finding(name=VIEWPORT, value=viewport, status=STATUS_SUCCESS)
