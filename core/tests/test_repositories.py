"""
Tests for the generic in-memory repository.
"""

from dataclasses import dataclass

import pytest

from core.exceptions import NotFoundError
from core.repositories import BaseRepository


@dataclass(frozen=True)
class Item:
    id: int
    kind: str


class ItemRepository(BaseRepository[Item]):
    resource_name = "item"


@pytest.fixture
def repository():
    return ItemRepository([Item(1, "a"), Item(2, "b"), Item(3, "a")])


class TestBaseRepository:

    def test_get_by_id_compares_as_string(self, repository):
        assert repository.get_by_id("2") == Item(2, "b")
        assert repository.get_by_id(2) == Item(2, "b")

    def test_get_by_id_missing(self, repository):
        with pytest.raises(NotFoundError) as exc_info:
            repository.get_by_id(9)

        assert exc_info.value.message == "Item not found"

    def test_get_by_id_or_none(self, repository):
        assert repository.get_by_id_or_none(9) is None

    def test_filter_by_attribute(self, repository):
        assert [i.id for i in repository.filter(kind="a")] == [1, 3]

    def test_filter_by_predicate(self, repository):
        assert [i.id for i in repository.filter(lambda i: i.id > 1, kind="a")] == [3]

    def test_exists_and_count(self, repository):
        assert repository.exists(kind="b")
        assert not repository.exists(kind="z")
        assert repository.count() == 3
        assert repository.count(kind="a") == 2

    def test_instances_are_independent(self):
        first = ItemRepository([Item(1, "a")])
        second = ItemRepository([Item(2, "b")])

        assert first.get_all() != second.get_all()

    def test_get_all_returns_copy(self, repository):
        items = repository.get_all()
        items.clear()

        assert repository.count() == 3
