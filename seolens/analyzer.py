import logging
from datetime import datetime

from .config import default_config
from .document import HtmlDocument
from .loader import DocumentLoader, normalize_url
from .meta_tags import MetaTagsAnalyzer
from .models import AnalysisResult
from .previews import PreviewSynthesizer
from .recommendations import derive_recommendations
from .scoring import ScoringModule
from .social import SocialMediaAnalyzer
from .storage import MemStorage
from .technical import TechnicalSEOAnalyzer

logger = logging.getLogger(__name__)


def analyze(html: str, origin_url: str, analyzed_at: datetime | None = None, config: dict | None = None) -> AnalysisResult:
    """
    Builds the full SEO assessment of an already fetched page.

    Args:
        html (str): Raw HTML, possibly malformed.
        origin_url (str): Absolute URL the HTML was fetched from.
        analyzed_at (datetime | None): Timestamp to record; defaults to now.
        config (dict | None): Configuration as returned by `load_config`.

    Returns:
        AnalysisResult: Same input and timestamp always give an equal result.
    """
    config = config if config else default_config()
    meta_config = config.get("MetaTagsAnalyzer", {})
    document = HtmlDocument(html, origin_url)

    meta_tags = MetaTagsAnalyzer(config=meta_config).analyze(document)
    social_media = SocialMediaAnalyzer().analyze(document)
    technical_seo = TechnicalSEOAnalyzer().analyze(document)

    total_score, rating = ScoringModule(config=config).analyze({
        "metaTags": meta_tags.score,
        "socialMedia": social_media.score,
        "technicalSeo": technical_seo.score,
    })
    previews = PreviewSynthesizer(config=meta_config).build(document)
    recommendations = derive_recommendations(meta_tags.items, social_media.items, technical_seo.items, document.domain)

    return AnalysisResult(
        url=origin_url,
        analyzed_at=(analyzed_at or datetime.now()).isoformat(),
        total_score=total_score,
        score_rating=rating,
        meta_tags=meta_tags,
        social_media=social_media,
        technical_seo=technical_seo,
        previews=previews,
        recommendations=tuple(recommendations),
    )


class SEOAnalyzer:
    """Fetches a page, analyzes it and records the summary."""

    def __init__(self, config=None, storage: MemStorage | None = None, loader: DocumentLoader | None = None):
        self.config = config if config else default_config()
        self.storage = storage
        self.loader = loader if loader else DocumentLoader(config=self.config)

    def run_analysis(self, target_url: str) -> AnalysisResult:
        url = normalize_url(target_url)
        logger.info("Starting SEO analysis for: %s", url)
        # Fetch errors propagate unchanged to the caller
        html = self.loader.fetch_document(url)
        result = analyze(html, url, config=self.config)
        if self.storage is not None:
            self.storage.save_analysis(result.summary())
        logger.info("SEO analysis complete for %s: %d (%s)", url, result.total_score, result.score_rating)
        return result
