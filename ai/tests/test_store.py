import json

import pytest

from mirror_service import mirror_store
from mirror_service.mirror_store import MirrorStore, UnknownGoalTypeError


def test_reflection_history_and_stats_persist(tmp_path):
    path = tmp_path / "mirror_state.json"
    store = MirrorStore(path)
    store.add_reflection("first", {"summary": "first"})
    store.add_reflection("second", {"summary": "second"})

    reloaded = MirrorStore(path)
    items = reloaded.list_reflections()
    assert [it["text"] for it in items] == ["second", "first"]
    assert reloaded.get_stats()["reflections"] == 2


def test_history_is_trimmed_oldest_first(tmp_path, monkeypatch):
    monkeypatch.setattr(mirror_store, "HISTORY_LIMIT", 2)
    store = MirrorStore(tmp_path / "s.json")
    for t in ("a", "b", "c"):
        store.add_reflection(t, {})
    assert [it["text"] for it in store.list_reflections()] == ["c", "b"]
    # trimming does not undo the counter
    assert store.get_stats()["reflections"] == 3


def test_journal_entries_newest_first(store):
    store.add_journal_entry("Day 1", "morning walk")
    store.add_journal_entry("Day 2", "rainy")
    assert [e["title"] for e in store.list_journal_entries()] == ["Day 2", "Day 1"]
    assert len(store.list_journal_entries(limit=1)) == 1


def test_goal_toggle_counts_only_completion(store):
    goal = store.add_goal("daily", "Walk 20 minutes")
    assert store.toggle_goal("daily", goal["id"])["completed"] is True
    assert store.toggle_goal("daily", goal["id"])["completed"] is False
    assert store.get_stats()["goalsCompleted"] == 1


def test_goal_errors(store):
    with pytest.raises(UnknownGoalTypeError):
        store.add_goal("yearly", "Read 50 books")
    with pytest.raises(KeyError):
        store.toggle_goal("weekly", "missing")
    goal = store.add_goal("habits", "Stretch")
    store.delete_goal("habits", goal["id"])
    assert store.get_goals()["habits"] == []
    with pytest.raises(KeyError):
        store.delete_goal("habits", goal["id"])


def test_corrupt_file_starts_empty(tmp_path):
    path = tmp_path / "mirror_state.json"
    path.write_text("{not json", encoding="utf-8")
    store = MirrorStore(path)
    assert store.list_reflections() == []
    assert store.get_goals() == {"daily": [], "weekly": [], "habits": []}


def test_written_file_is_plain_json(store):
    store.add_goal("weekly", "Call mom")
    raw = json.loads(store.path.read_text(encoding="utf-8"))
    assert raw["goals"]["weekly"][0]["text"] == "Call mom"
    assert set(raw) == {"reflectionHistory", "journalEntries", "goals", "stats"}


def test_legacy_item_shapes_are_normalized_on_load(tmp_path):
    from fastapi.testclient import TestClient

    from mirror_service.app import create_app

    path = tmp_path / "mirror_state.json"
    analysis = {
        "summary": "Old entry.", "emotions": ["neutral"], "patterns": ["Thoughtful exploration of ideas"],
        "strengths": ["Clear communication"], "blindSpots": ["Well-rounded perspective"],
        "rootCause": "Exploring personal growth and understanding",
        "biases": ["No significant biases detected"], "improvements": ["Identify one actionable step forward"],
        "thoughtClarity": 90, "communicationClarity": 50,
    }
    path.write_text(json.dumps({
        "reflectionHistory": [
            {"date": "2024-01-01T00:00:00Z", "text": "Old entry.", "analysis": analysis},
            {"date": "2024-01-02T00:00:00Z", "text": "Partial.", "analysis": {"summary": "Partial."}},
            "not a dict",
            {"id": 5, "date": "2024-01-03T00:00:00Z", "text": "no analysis"},
        ],
        "goals": {"daily": [{"id": 1700000000000, "text": "Walk", "completed": False}, {"id": 2}]},
    }), encoding="utf-8")

    store = MirrorStore(path)
    assert [it["text"] for it in store.list_reflections()] == ["Partial.", "Old entry."]
    assert all(isinstance(it["id"], str) and it["id"] for it in store.list_reflections())
    assert store.get_goals()["daily"] == [{"id": "1700000000000", "text": "Walk", "completed": False}]

    client = TestClient(create_app(store))
    history = client.get("/reflection/history")
    assert history.status_code == 200
    assert [it["text"] for it in history.json()["items"]] == ["Old entry."]

    goals = client.get("/goals")
    assert goals.status_code == 200
    assert goals.json()["daily"][0]["id"] == "1700000000000"
    assert client.post("/goals/daily/1700000000000/toggle").json()["completed"] is True
    assert client.delete("/goals/daily/1700000000000").status_code == 200
