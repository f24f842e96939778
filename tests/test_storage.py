from concurrent.futures import ThreadPoolExecutor

from seo_inspector.models import Recommendation, TaskCreate
from seo_inspector.storage import HistoryStore, TaskStore, task_from_recommendation


def test_history_is_append_only_per_url():
    store = HistoryStore()
    store.record("https://a.com", 70)
    store.record("https://b.com", 50)
    store.record("https://a.com", 80)

    entries = store.for_url("https://a.com")
    assert [e.score for e in entries] == [70, 80]
    assert entries[0].timestamp <= entries[1].timestamp
    assert store.for_url("https://c.com") == []


def test_tasks_get_ids_and_timestamps():
    store = TaskStore()
    first = store.add(TaskCreate(url="https://a.com", title="Fix title", description="Too short"))
    second = store.add(TaskCreate(url="https://a.com", title="Add canonical", description="Missing", priority="high"))

    assert (first.id, second.id) == (1, 2)
    assert first.status == "todo"
    assert first.priority == "medium"
    assert first.created_at == first.updated_at
    assert [t.title for t in store.for_url("https://a.com")] == ["Fix title", "Add canonical"]


def test_task_store_is_thread_safe():
    store = TaskStore()
    with ThreadPoolExecutor(max_workers=8) as executor:
        list(executor.map(
            lambda i: store.add(TaskCreate(url="https://a.com", title=f"t{i}", description="d")),
            range(50),
        ))
    ids = sorted(t.id for t in store.for_url("https://a.com"))
    assert ids == list(range(1, 51))


def test_task_from_recommendation_priority():
    def rec(kind):
        return Recommendation(type=kind, title="T", description="D")

    assert task_from_recommendation("https://a.com", rec("error")).priority == "high"
    assert task_from_recommendation("https://a.com", rec("warning")).priority == "medium"
    assert task_from_recommendation("https://a.com", rec("success")).priority == "low"
    assert task_from_recommendation("https://a.com", rec("info")).status == "todo"
