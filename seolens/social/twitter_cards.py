from ..document import HtmlDocument
from ..models import Finding, STATUS_ERROR, STATUS_SUCCESS, STATUS_WARNING
from .open_graph import OG_IMAGE, read_open_graph

TWITTER_CARD = "twitter:card"
TWITTER_IMAGE = "twitter:image"

SMALL_CARD = "summary"
LARGE_CARD = "summary_large_image"


def read_twitter_tag(document: HtmlDocument, name: str) -> str | None:
    return document.attr(f'meta[name="{name}"]', "content")


def check_twitter_card(document: HtmlDocument) -> Finding:
    card = read_twitter_tag(document, TWITTER_CARD)
    if card is None:
        return Finding(name=TWITTER_CARD, status=STATUS_ERROR, message=f"Missing {TWITTER_CARD}")
    if card == SMALL_CARD and read_open_graph(document, OG_IMAGE) is not None:
        return Finding(
            name=TWITTER_CARD,
            value=card,
            status=STATUS_WARNING,
            message=f'Consider using "{LARGE_CARD}"',
        )
    return Finding(name=TWITTER_CARD, value=card, status=STATUS_SUCCESS)


def check_twitter_image(document: HtmlDocument) -> Finding:
    image = read_twitter_tag(document, TWITTER_IMAGE)
    if image is not None:
        return Finding(name=TWITTER_IMAGE, value=image, status=STATUS_SUCCESS)
    if read_open_graph(document, OG_IMAGE) is not None:
        return Finding(
            name=TWITTER_IMAGE,
            status=STATUS_WARNING,
            message="Falls back to og:image, but dedicated Twitter image recommended",
        )
    return Finding(name=TWITTER_IMAGE, status=STATUS_ERROR, message=f"Missing {TWITTER_IMAGE}")
