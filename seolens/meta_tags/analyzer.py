from ..base_module import CategoryAnalyzer
from ..document import HtmlDocument
from ..models import Finding
from .title_meta import TITLE, DESCRIPTION, check_title, check_meta_description
from .head_links import (
    CANONICAL_URL,
    ROBOTS,
    VIEWPORT,
    check_canonical_tag,
    check_meta_robots,
    check_viewport_meta,
)


class MetaTagsAnalyzer(CategoryAnalyzer):
    """Analyzes the core meta tags of a page."""

    check_names = (TITLE, DESCRIPTION, CANONICAL_URL, ROBOTS, VIEWPORT)

    def __init__(self, config=None):
        super().__init__(config=config)
        self.title_min_len = self.config.get("title_min_length", 30)
        self.title_max_len = self.config.get("title_max_length", 60)
        self.desc_min_len = self.config.get("desc_min_length", 120)
        self.desc_max_len = self.config.get("desc_max_length", 160)

    def run_checks(self, document: HtmlDocument) -> list[Finding]:
        return [
            check_title(document, self.title_min_len, self.title_max_len),
            check_meta_description(document, self.desc_min_len, self.desc_max_len),
            check_canonical_tag(document),
            check_meta_robots(document),
            check_viewport_meta(document),
        ]
