"""Social media tag analysis package.

Provides `SocialMediaAnalyzer` covering Open Graph and Twitter Card tags.
"""

from .analyzer import SocialMediaAnalyzer
