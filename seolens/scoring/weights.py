from decimal import Decimal

STATUS_WEIGHTS = {
    "success": Decimal("1"),
    "warning": Decimal("0.5"),
    "error": Decimal("0"),
}

DEFAULT_CATEGORY_WEIGHTS = {"metaTags": 0.4, "socialMedia": 0.3, "technicalSeo": 0.3}

# (exclusive upper bound, rating); anything at or above the last bound is Excellent
RATING_THRESHOLDS = ((50, "Poor"), (70, "Fair"), (90, "Good"))
TOP_RATING = "Excellent"

RATING_COLORS = {"Poor": "red", "Fair": "amber", "Good": "green", "Excellent": "emerald"}
