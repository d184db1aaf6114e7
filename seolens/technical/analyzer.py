from ..base_module import CategoryAnalyzer
from ..document import HtmlDocument
from ..models import Finding
from .html_core import (
    LANGUAGE,
    CHARSET,
    FAVICON,
    MOBILE_FRIENDLY,
    check_language,
    check_character_encoding,
    check_favicon,
    check_mobile_friendliness,
)
from .site_checks import SSL_CERTIFICATE, check_https_usage


class TechnicalSEOAnalyzer(CategoryAnalyzer):
    """Analyzes technical SEO aspects of a page and the URL it was served from."""

    check_names = (LANGUAGE, CHARSET, FAVICON, SSL_CERTIFICATE, MOBILE_FRIENDLY)

    def run_checks(self, document: HtmlDocument) -> list[Finding]:
        return [
            check_language(document),
            check_character_encoding(document),
            check_favicon(document),
            check_https_usage(document.url),
            check_mobile_friendliness(document),
        ]
