from ..document import HtmlDocument
from ..models import Finding, STATUS_ERROR, STATUS_SUCCESS, STATUS_WARNING

OG_TITLE = "og:title"
OG_DESCRIPTION = "og:description"
OG_IMAGE = "og:image"
OG_TYPE = "og:type"


def read_open_graph(document: HtmlDocument, prop: str) -> str | None:
    return document.attr(f'meta[property="{prop}"]', "content")


def check_open_graph_tag(document: HtmlDocument, prop: str, missing_status: str = STATUS_ERROR) -> Finding:
    content = read_open_graph(document, prop)
    if content is None:
        return Finding(name=prop, status=missing_status, message=f"Missing {prop}")
    return Finding(name=prop, value=content, status=STATUS_SUCCESS)


def check_open_graph_type(document: HtmlDocument) -> Finding:
    # og:type defaults to "website" on most consumers, so its absence is minor
    return check_open_graph_tag(document, OG_TYPE, missing_status=STATUS_WARNING)
