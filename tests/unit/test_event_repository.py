"""Tests for the sync EventRepository against a real SQLite file."""
from datetime import datetime

import pytest

from eventmi.infrastructure.repositories import EventRepository

START = datetime(2024, 3, 20, 9, 10, 10)
END = datetime(2024, 3, 21, 9, 10, 10)


@pytest.fixture
def repo(db_connection) -> EventRepository:
    return EventRepository(db_connection)


class TestEventRepository:

    def test_create_assigns_increasing_ids(self, repo: EventRepository):
        first = repo.create("First", START, END, "Plovdiv")
        second = repo.create("Second", START, END, "Plovdiv")

        assert second > first

    def test_get_by_id_returns_dict_with_datetimes(self, repo: EventRepository):
        event_id = repo.create("Conference", START, END, "Sofia")

        event = repo.get_by_id(event_id)

        assert event["id"] == event_id
        assert event["name"] == "Conference"
        assert event["start_date"] == START
        assert event["end_date"] == END
        assert event["place"] == "Sofia"
        assert isinstance(event["created_at"], datetime)

    def test_get_by_id_missing(self, repo: EventRepository):
        assert repo.get_by_id(12345) is None

    def test_get_by_name_returns_lowest_id(self, repo: EventRepository):
        first = repo.create("Duplicate", START, END, "Plovdiv")
        repo.create("Duplicate", START, END, "Varna")

        assert repo.get_by_name("Duplicate")["id"] == first

    def test_exists_by_name_is_exact(self, repo: EventRepository):
        repo.create("Exact Name", START, END, "Plovdiv")

        assert repo.exists_by_name("Exact Name")
        assert not repo.exists_by_name("Exact")

    def test_list_all_orders_by_start_then_id(self, repo: EventRepository):
        late = repo.create("Late", datetime(2024, 12, 1, 10, 0), END, "Sofia")
        early_a = repo.create("Early A", datetime(2024, 1, 1, 10, 0), END, "Sofia")
        early_b = repo.create("Early B", datetime(2024, 1, 1, 10, 0), END, "Sofia")

        assert [e["id"] for e in repo.list_all()] == [early_a, early_b, late]

    def test_update_replaces_fields(self, repo: EventRepository):
        event_id = repo.create("Before", START, END, "Plovdiv")
        new_end = datetime(2024, 3, 22, 12, 0)

        assert repo.update(event_id, name="After", start=START, end=new_end, place="Ruse")

        event = repo.get_by_id(event_id)
        assert event["name"] == "After"
        assert event["end_date"] == new_end
        assert event["place"] == "Ruse"

    def test_update_missing_returns_false(self, repo: EventRepository):
        assert not repo.update(999, name="X", start=START, end=END, place="Y")

    def test_delete(self, repo: EventRepository):
        event_id = repo.create("Doomed", START, END, "Plovdiv")

        assert repo.delete(event_id)
        assert repo.get_by_id(event_id) is None
        assert not repo.delete(event_id)

    def test_count(self, repo: EventRepository):
        assert repo.count() == 0
        repo.create("One", START, END, "Plovdiv")
        assert repo.count() == 1

    def test_init_db_is_idempotent(self, repo: EventRepository):
        from eventmi.database import init_db

        repo.create("Survivor", START, END, "Plovdiv")
        init_db()

        assert repo.exists_by_name("Survivor")
