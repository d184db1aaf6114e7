from decimal import Decimal

from ..base_module import SEOModule
from .weights import DEFAULT_CATEGORY_WEIGHTS
from .util import round_half_up, score_to_rating


class ScoringModule(SEOModule):
    """Combines per-category scores into the overall score and rating."""

    def __init__(self, config=None):
        super().__init__(config=config)
        self.scoring_config = self.config.get(self.module_name, {})
        self.category_weights = dict(DEFAULT_CATEGORY_WEIGHTS)
        self.category_weights.update(self.scoring_config.get("category_weights", {}))

    def total_score(self, category_scores: dict) -> int:
        """
        Weighted sum of the category scores.

        Args:
            category_scores (dict): Score per category key
                (metaTags, socialMedia, technicalSeo).

        Returns:
            int: The total, rounded half up.
        """
        total = Decimal(0)
        for category, weight in self.category_weights.items():
            total += Decimal(str(weight)) * category_scores.get(category, 0)
        return round_half_up(total)

    def analyze(self, category_scores: dict) -> tuple[int, str]:
        total = self.total_score(category_scores)
        return total, score_to_rating(total)
