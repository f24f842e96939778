"""Process-local stores for analysis history and follow-up tasks.

Both stores hold copies of data derived from reports; neither touches
the reports themselves.
"""

import threading
from datetime import datetime, timezone

from seo_inspector.models import HistoryEntry, Recommendation, SEOTask, TaskCreate

PRIORITY_BY_TYPE = {
    "error": "high",
    "warning": "medium",
}


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class HistoryStore:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: list[HistoryEntry] = []

    def record(self, url: str, score: int) -> HistoryEntry:
        entry = HistoryEntry(url=url, score=score, timestamp=utcnow())
        with self._lock:
            self._entries.append(entry)
        return entry

    def for_url(self, url: str) -> list[HistoryEntry]:
        with self._lock:
            return [e for e in self._entries if e.url == url]

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


class TaskStore:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._tasks: list[SEOTask] = []
        self._next_id = 1

    def add(self, task: TaskCreate) -> SEOTask:
        now = utcnow()
        with self._lock:
            saved = SEOTask(
                id=self._next_id,
                created_at=now,
                updated_at=now,
                **task.model_dump(),
            )
            self._next_id += 1
            self._tasks.append(saved)
        return saved

    def for_url(self, url: str) -> list[SEOTask]:
        with self._lock:
            return [t for t in self._tasks if t.url == url]

    def clear(self) -> None:
        with self._lock:
            self._tasks.clear()
            self._next_id = 1


def task_from_recommendation(url: str, rec: Recommendation) -> TaskCreate:
    return TaskCreate(
        url=url,
        title=rec.title,
        description=rec.description,
        priority=PRIORITY_BY_TYPE.get(rec.type, "low"),
        status="todo",
    )
