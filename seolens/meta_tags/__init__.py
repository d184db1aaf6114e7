"""Core meta tag analysis package.

Provides `MetaTagsAnalyzer`, which evaluates the title, description,
canonical, robots and viewport tags of a page.
"""

from .analyzer import MetaTagsAnalyzer
