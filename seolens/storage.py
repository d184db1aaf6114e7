"""In-memory store for analysis summaries."""
import itertools
import threading
from datetime import datetime

from .models import AnalysisSummary


class MemStorage:
    """
    Keeps one summary row per analysis, newest retrievable first.

    Rows are plain dicts in the wire shape plus an integer `id`. Access is
    guarded by a lock so the store can be shared by request threads.
    """

    def __init__(self, recent_limit: int = 10):
        self.recent_limit = recent_limit
        self._analyses: dict[int, dict] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def save_analysis(self, summary: AnalysisSummary) -> dict:
        row = summary.to_dict()
        if not row.get("analyzedAt"):
            row["analyzedAt"] = datetime.now().isoformat()
        with self._lock:
            row["id"] = next(self._ids)
            self._analyses[row["id"]] = row
        return dict(row)

    def get_analysis(self, analysis_id: int) -> dict | None:
        with self._lock:
            row = self._analyses.get(analysis_id)
        return dict(row) if row else None

    def get_recent_analyses(self, limit: int | None = None) -> list[dict]:
        limit = self.recent_limit if limit is None else limit
        if limit <= 0:
            return []
        with self._lock:
            rows = list(self._analyses.values())
        # Ties on the timestamp fall back to insertion order
        rows.sort(key=lambda r: (r["analyzedAt"], r["id"]), reverse=True)
        return [dict(r) for r in rows[:limit]]
