"""Scoring package.

Turns category findings into 0-100 scores, combines them into the weighted
total and maps scores onto the shared rating scale.
"""

from .util import score_category, score_to_rating, score_color
from .analyzer import ScoringModule
