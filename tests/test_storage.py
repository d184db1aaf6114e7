from seolens.models import AnalysisSummary
from seolens.storage import MemStorage


def _summary(url, analyzed_at, score=50):
    return AnalysisSummary(url, score, score, score, score, analyzed_at)


def test_save_assigns_ids_and_round_trips():
    storage = MemStorage()
    row = storage.save_analysis(_summary("https://a.example", "2024-01-01T00:00:00"))
    assert row["id"] == 1
    assert storage.get_analysis(1)["url"] == "https://a.example"
    assert storage.get_analysis(99) is None


def test_recent_analyses_newest_first_and_limited():
    storage = MemStorage(recent_limit=2)
    storage.save_analysis(_summary("https://old.example", "2024-01-01T00:00:00"))
    storage.save_analysis(_summary("https://new.example", "2024-03-01T00:00:00"))
    storage.save_analysis(_summary("https://mid.example", "2024-02-01T00:00:00"))
    assert [r["url"] for r in storage.get_recent_analyses()] == ["https://new.example", "https://mid.example"]
    assert len(storage.get_recent_analyses(limit=10)) == 3
    assert storage.get_recent_analyses(limit=0) == []


def test_rows_are_copies():
    storage = MemStorage()
    storage.save_analysis(_summary("https://a.example", "2024-01-01T00:00:00"))
    storage.get_recent_analyses()[0]["url"] = "tampered"
    assert storage.get_analysis(1)["url"] == "https://a.example"
