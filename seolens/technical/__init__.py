"""Technical SEO analysis package.

Provides `TechnicalSEOAnalyzer` orchestrating the HTML-level and
URL-level technical checks.
"""

from .analyzer import TechnicalSEOAnalyzer
