from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple

from .models import (
    Finding,
    Recommendation,
    PRIORITY_HIGH,
    PRIORITY_LOW,
    PRIORITY_MEDIUM,
    STATUS_ERROR,
    STATUS_WARNING,
)
from .meta_tags.title_meta import TITLE, DESCRIPTION, TITLE_TARGET, DESCRIPTION_TARGET
from .meta_tags.head_links import CANONICAL_URL, VIEWPORT
from .social.open_graph import OG_TITLE, OG_DESCRIPTION, OG_IMAGE
from .social.twitter_cards import TWITTER_CARD, TWITTER_IMAGE, SMALL_CARD, LARGE_CARD
from .technical.html_core import LANGUAGE, CHARSET, MOBILE_FRIENDLY
from .technical.site_checks import SSL_CERTIFICATE

# name -> (title, description, code); "{domain}" in code is replaced with the analyzed host
Advice = Tuple[str, str, Optional[str]]

VIEWPORT_SNIPPET = '<meta name="viewport" content="width=device-width, initial-scale=1" />'
LARGE_CARD_SNIPPET = f'<meta name="twitter:card" content="{LARGE_CARD}" />'

META_ERRORS: Dict[str, Advice] = {
    TITLE: (
        "Add a title tag",
        "The title tag is crucial for SEO. It appears in search engine results and browser tabs.",
        "<title>Your Website Title | {domain}</title>",
    ),
    DESCRIPTION: (
        "Add a meta description",
        "Meta descriptions provide a brief summary of the page content and appear in search results.",
        '<meta name="description" content="Brief description of your webpage content." />',
    ),
    CANONICAL_URL: (
        "Add a canonical URL tag",
        "You should add a canonical URL to indicate the preferred version of this page and prevent duplicate content issues.",
        '<link rel="canonical" href="https://{domain}/" />',
    ),
    VIEWPORT: (
        "Add a viewport meta tag",
        "The viewport meta tag is essential for responsive design and mobile-friendly pages.",
        VIEWPORT_SNIPPET,
    ),
}

SOCIAL_ERRORS: Dict[str, Advice] = {
    OG_TITLE: (
        "Add Open Graph title tag",
        "Open Graph tags help control how your content appears when shared on social media.",
        '<meta property="og:title" content="Your Page Title" />',
    ),
    OG_DESCRIPTION: (
        "Add Open Graph description tag",
        "This helps provide context when your content is shared on social platforms.",
        '<meta property="og:description" content="Description of your page content" />',
    ),
    OG_IMAGE: (
        "Add Open Graph image tag",
        "Images make your shared content more engaging on social media.",
        '<meta property="og:image" content="https://{domain}/your-image.jpg" />',
    ),
    TWITTER_CARD: (
        "Add Twitter Card meta tag",
        "Twitter Cards enhance the appearance of shared links on Twitter.",
        LARGE_CARD_SNIPPET,
    ),
    TWITTER_IMAGE: (
        "Add Twitter image meta tag",
        "A dedicated Twitter image ensures optimal display when your content is shared on Twitter.",
        '<meta name="twitter:image" content="https://{domain}/your-twitter-image.jpg" />',
    ),
}

TECHNICAL_ERRORS: Dict[str, Advice] = {
    LANGUAGE: (
        "Add language attribute to HTML tag",
        "The language attribute helps search engines and screen readers determine the language of your content.",
        '<html lang="en">',
    ),
    CHARSET: (
        "Add charset meta tag",
        "Defining the character encoding ensures proper rendering of your content.",
        '<meta charset="UTF-8" />',
    ),
    SSL_CERTIFICATE: (
        "Enable HTTPS",
        "HTTPS is essential for security and is a ranking factor for search engines.",
        None,
    ),
    MOBILE_FRIENDLY: (
        "Make your site mobile-friendly",
        "A responsive design is crucial for mobile users and search engine rankings.",
        VIEWPORT_SNIPPET,
    ),
}

LENGTH_WARNINGS: Dict[str, Tuple[str, str, str]] = {
    TITLE: ("Optimize your title tag length", "title", TITLE_TARGET),
    DESCRIPTION: ("Optimize your meta description length", "description", DESCRIPTION_TARGET),
}


def _from_advice(advice: Advice, priority: str, domain: str) -> Recommendation:
    title, description, code = advice
    return Recommendation(
        priority=priority,
        title=title,
        description=description,
        code=code.replace("{domain}", domain) if code else None,
    )


def _length_warning(item: Finding) -> Optional[Recommendation]:
    if item.name not in LENGTH_WARNINGS:
        return None
    title, noun, target = LENGTH_WARNINGS[item.name]
    length = len(item.value or "")
    return Recommendation(
        priority=PRIORITY_MEDIUM,
        title=title,
        description=(
            f"Your {noun} is {length} characters long. The optimal length is between "
            f"{target} characters for better visibility in search results."
        ),
    )


def _twitter_card_upgrade(item: Finding) -> Optional[Recommendation]:
    if item.name != TWITTER_CARD or item.value != SMALL_CARD:
        return None
    return Recommendation(
        priority=PRIORITY_LOW,
        title="Upgrade Twitter Card type",
        description=f'Consider using "{LARGE_CARD}" instead of "{SMALL_CARD}" for better visibility on Twitter.',
        code=LARGE_CARD_SNIPPET,
    )


def derive_recommendations(
    meta_tags: Sequence[Finding],
    social_media: Sequence[Finding],
    technical_seo: Sequence[Finding],
    domain: str,
) -> List[Recommendation]:
    """
    Turns findings into remediation advice.

    Output follows category order (meta, social, technical) and, within a
    category, the order the findings were produced in. Findings whose name has
    no advice attached are skipped.
    """
    recommendations: List[Recommendation] = []

    for item in meta_tags:
        if item.status == STATUS_ERROR and item.name in META_ERRORS:
            recommendations.append(_from_advice(META_ERRORS[item.name], PRIORITY_HIGH, domain))
        elif item.status == STATUS_WARNING:
            rec = _length_warning(item)
            if rec:
                recommendations.append(rec)

    for item in social_media:
        if item.status == STATUS_ERROR and item.name in SOCIAL_ERRORS:
            recommendations.append(_from_advice(SOCIAL_ERRORS[item.name], PRIORITY_MEDIUM, domain))
        elif item.status == STATUS_WARNING:
            rec = _twitter_card_upgrade(item)
            if rec:
                recommendations.append(rec)

    for item in technical_seo:
        if item.status == STATUS_ERROR and item.name in TECHNICAL_ERRORS:
            priority = PRIORITY_HIGH if item.name == SSL_CERTIFICATE else PRIORITY_MEDIUM
            recommendations.append(_from_advice(TECHNICAL_ERRORS[item.name], priority, domain))

    return recommendations
