import pytest

from seolens.models import Finding
from seolens.scoring import ScoringModule, score_category, score_to_rating, score_color


def _items(*statuses):
    return [Finding(name=f"check{i}", status=s) for i, s in enumerate(statuses)]


def test_status_weights():
    assert score_category(_items("success")) == 100
    assert score_category(_items("warning")) == 50
    assert score_category(_items("error")) == 0


def test_empty_list_scores_zero():
    assert score_category([]) == 0


def test_rounding_of_six_item_categories():
    assert score_category(_items("success", "success", "success", "success", "success", "error")) == 83
    assert score_category(_items("warning", "error", "error", "error", "error", "error")) == 8


def test_score_is_monotonic_in_status():
    order = ["error", "warning", "success"]
    base = ["success", "error", "warning", "error", "success"]
    for index in range(len(base)):
        scores = []
        for status in order:
            statuses = list(base)
            statuses[index] = status
            scores.append(score_category(_items(*statuses)))
        assert scores == sorted(scores)


def test_total_uses_category_weights():
    module = ScoringModule()
    assert module.total_score({"metaTags": 80, "socialMedia": 83, "technicalSeo": 90}) == 84


def test_total_rounds_half_up():
    module = ScoringModule()
    assert module.total_score({"metaTags": 0, "socialMedia": 10, "technicalSeo": 5}) == 5


def test_category_weights_are_configurable():
    module = ScoringModule(config={"ScoringModule": {"category_weights": {"metaTags": 1.0, "socialMedia": 0, "technicalSeo": 0}}})
    assert module.analyze({"metaTags": 70, "socialMedia": 0, "technicalSeo": 0}) == (70, "Good")


@pytest.mark.parametrize("score,rating", [
    (0, "Poor"), (49, "Poor"), (50, "Fair"), (69, "Fair"),
    (70, "Good"), (89, "Good"), (90, "Excellent"), (100, "Excellent"),
])
def test_rating_thresholds(score, rating):
    assert score_to_rating(score) == rating


def test_colors_follow_rating_thresholds():
    assert [score_color(s) for s in (10, 60, 80, 95)] == ["red", "amber", "green", "emerald"]


def test_rating_strings_come_from_the_threshold_table():
    from seolens.scoring.weights import RATING_THRESHOLDS, TOP_RATING, RATING_COLORS

    ratings = {rating for _, rating in RATING_THRESHOLDS} | {TOP_RATING}
    assert {score_to_rating(s) for s in range(101)} == ratings
    assert set(RATING_COLORS) == ratings


def test_reads_its_own_section_of_the_full_config():
    from seolens.base_module import SEOModule
    from seolens.config import default_config

    config = default_config()
    config["ScoringModule"]["category_weights"] = {"metaTags": 0, "socialMedia": 0, "technicalSeo": 1.0}
    module = ScoringModule(config=config)
    assert isinstance(module, SEOModule)
    assert module.module_name == "ScoringModule"
    assert module.analyze({"metaTags": 100, "socialMedia": 100, "technicalSeo": 45}) == (45, "Poor")
