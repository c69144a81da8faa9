"""
Generic Base Repository
=======================

Type-safe, generic repository over an in-memory sequence of records.
All app-specific repositories inherit from this.

Repositories are plain instances: whoever constructs one owns its
lifetime, and two instances never share mutable state.

Usage:
    from core.repositories import BaseRepository

    class ProductRepository(BaseRepository[Product]):
        def list_by_category(self, category):
            return self.filter(category=category)

    repo = ProductRepository(MOCK_PRODUCTS)
    repo.get_by_id("1")
"""

from typing import TypeVar, Generic, Optional, Any, Iterable, List, Callable

from core.exceptions import NotFoundError

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Generic read repository with standard lookup operations.

    Records must expose an ``id`` attribute (override ``pk_attr`` otherwise).
    """

    pk_attr = "id"
    resource_name = "record"

    def __init__(self, items: Iterable[T]):
        self._items: tuple = tuple(items)

    # ── Read ──────────────────────────────────────────────────────────

    def get_by_id(self, pk: Any) -> T:
        """
        Get a single instance by primary key.
        Raises NotFoundError if not found.
        """
        item = self.get_by_id_or_none(pk)
        if item is None:
            raise NotFoundError(
                f"{self.resource_name.capitalize()} not found",
                resource=self.resource_name,
                id=str(pk),
            )
        return item

    def get_by_id_or_none(self, pk: Any) -> Optional[T]:
        """Get a single instance by primary key, or None."""
        for item in self._items:
            if str(getattr(item, self.pk_attr)) == str(pk):
                return item
        return None

    def get_all(self) -> List[T]:
        """Return all instances in their stored order."""
        return list(self._items)

    def filter(self, predicate: Optional[Callable[[T], bool]] = None, **kwargs) -> List[T]:
        """
        Filter instances by a predicate and/or exact attribute values.

            repo.filter(category="electronics")
            repo.filter(lambda p: p.price < 50)
        """
        results = []
        for item in self._items:
            if predicate is not None and not predicate(item):
                continue
            if any(getattr(item, attr) != value for attr, value in kwargs.items()):
                continue
            results.append(item)
        return results

    def exists(self, **kwargs) -> bool:
        """Check if at least one instance matches the given filters."""
        return bool(self.filter(**kwargs))

    def count(self, **kwargs) -> int:
        """Count instances matching the given filters (all if no filters)."""
        if kwargs:
            return len(self.filter(**kwargs))
        return len(self._items)
