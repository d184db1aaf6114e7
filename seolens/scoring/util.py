from decimal import Decimal, ROUND_HALF_UP

from .weights import STATUS_WEIGHTS, RATING_THRESHOLDS, TOP_RATING, RATING_COLORS


def round_half_up(value) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def score_category(items) -> int:
    """Share of earned points over the findings, as an integer percentage."""
    if not items:
        return 0
    points = sum(STATUS_WEIGHTS[item.status] for item in items)
    return round_half_up(Decimal(100) * points / len(items))


def score_to_rating(score: int) -> str:
    for upper_bound, rating in RATING_THRESHOLDS:
        if score < upper_bound:
            return rating
    return TOP_RATING


def score_color(score: int) -> str:
    return RATING_COLORS[score_to_rating(score)]
