"""SEOLens: single-page SEO assessment.

`analyze` scores an already fetched document; `SEOAnalyzer` adds fetching
and summary storage around it.
"""

from .analyzer import analyze, SEOAnalyzer
from .errors import FetchError
from .loader import DocumentLoader, normalize_url
from .models import AnalysisResult
from .scoring import score_to_rating, score_color
from .storage import MemStorage

__version__ = "1.0.0"
