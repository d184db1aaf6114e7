from ..base_module import CategoryAnalyzer
from ..document import HtmlDocument
from ..models import Finding
from .open_graph import (
    OG_TITLE,
    OG_DESCRIPTION,
    OG_IMAGE,
    OG_TYPE,
    check_open_graph_tag,
    check_open_graph_type,
)
from .twitter_cards import TWITTER_CARD, TWITTER_IMAGE, check_twitter_card, check_twitter_image


class SocialMediaAnalyzer(CategoryAnalyzer):
    """Analyzes the Open Graph and Twitter Card tags used for link previews."""

    check_names = (OG_TITLE, OG_DESCRIPTION, OG_IMAGE, OG_TYPE, TWITTER_CARD, TWITTER_IMAGE)

    def run_checks(self, document: HtmlDocument) -> list[Finding]:
        return [
            check_open_graph_tag(document, OG_TITLE),
            check_open_graph_tag(document, OG_DESCRIPTION),
            check_open_graph_tag(document, OG_IMAGE),
            check_open_graph_type(document),
            check_twitter_card(document),
            check_twitter_image(document),
        ]
