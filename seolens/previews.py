"""Search result and social card previews built from the parsed page."""
from .document import HtmlDocument
from .models import GooglePreview, Previews, SocialPreview
from .social.open_graph import OG_TITLE, OG_DESCRIPTION, OG_IMAGE, read_open_graph
from .social.twitter_cards import TWITTER_CARD, TWITTER_IMAGE, read_twitter_tag

NO_TITLE = "No Title"
NO_DESCRIPTION = "No description provided."


def _within(length: int, low: int, high: int) -> bool:
    return low <= length <= high


class PreviewSynthesizer:
    def __init__(self, config=None):
        self.config = config if config else {}
        self.title_min_len = self.config.get("title_min_length", 30)
        self.title_max_len = self.config.get("title_max_length", 60)
        self.desc_min_len = self.config.get("desc_min_length", 120)
        self.desc_max_len = self.config.get("desc_max_length", 160)

    def google_preview(self, document: HtmlDocument) -> GooglePreview:
        # Fallbacks are for display only; the findings still record the absence
        title = document.text("title")
        if title is None:
            title = NO_TITLE
        description = document.attr('meta[name="description"]', "content")
        if description is None:
            description = NO_DESCRIPTION
        return GooglePreview(
            title=title,
            url=document.domain,
            description=description,
            title_length=len(title),
            description_length=len(description),
            is_title_length_optimal=_within(len(title), self.title_min_len, self.title_max_len),
            is_description_length_optimal=_within(len(description), self.desc_min_len, self.desc_max_len),
        )

    def social_preview(self, document: HtmlDocument, google: GooglePreview) -> SocialPreview:
        og_title = read_open_graph(document, OG_TITLE)
        og_description = read_open_graph(document, OG_DESCRIPTION)
        og_image = read_open_graph(document, OG_IMAGE)
        has_card = read_twitter_tag(document, TWITTER_CARD) is not None
        has_twitter_image = read_twitter_tag(document, TWITTER_IMAGE) is not None
        return SocialPreview(
            title=og_title if og_title is not None else google.title,
            description=og_description if og_description is not None else google.description,
            image=og_image,
            is_open_graph_complete=all(v is not None for v in (og_title, og_description, og_image)),
            is_twitter_card_complete=has_card and (has_twitter_image or og_image is not None),
        )

    def build(self, document: HtmlDocument) -> Previews:
        google = self.google_preview(document)
        return Previews(google=google, social=self.social_preview(document, google))
