"""
In-memory repository shared by posts and comments.

Entities are kept in a list in insertion order and looked up by a
linear scan on ``id``.  Nothing is ever updated or deleted.  A lock
guards the whole scan-then-append in :meth:`InMemoryRepository.insert`
so two concurrent inserts of the same id cannot both succeed.
"""

from __future__ import annotations

import logging
import threading
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from .result import ErrorKind, Result

T = TypeVar("T")

logger = logging.getLogger(__name__)


class InMemoryRepository(Generic[T]):
    """Insertion-ordered collection of entities with unique ``id``.

    Subclasses set :attr:`entity_name`, which is used in error
    messages (``"Post with id: 3 already exists"``).
    """

    entity_name = "Entity"

    def __init__(self, initial: Optional[Iterable[T]] = None) -> None:
        self._items: List[T] = []
        self._lock = threading.Lock()
        for item in initial or ():
            result = self.insert(item)
            if not result.ok:
                raise ValueError(f"Cannot seed repository: {result.error.message}")

    def insert(self, item: T) -> Result[T]:
        """Append ``item`` unless an entity with the same id is stored.

        Returns a successful result holding the item, or an
        ``ALREADY_EXISTS`` failure with the collection left unchanged.
        """
        with self._lock:
            if self._find(item.id) is not None:
                logger.warning("%s %s already exists, insert rejected", self.entity_name, item.id)
                return Result.failure(ErrorKind.ALREADY_EXISTS, self.entity_name, item.id)
            self._items.append(item)
        logger.info("Inserted %s %s", self.entity_name.lower(), item.id)
        return Result.success(item)

    def get_by_id(self, id: int) -> Result[T]:
        """Return the first entity with the given id, or a ``NOT_FOUND`` failure."""
        with self._lock:
            item = self._find(id)
        if item is None:
            return Result.failure(ErrorKind.NOT_FOUND, self.entity_name, id)
        return Result.success(item)

    def _find(self, id: int) -> Optional[T]:
        for item in self._items:
            if item.id == id:
                return item
        return None

    def snapshot(self) -> List[T]:
        """Return a copy of the stored entities in insertion order."""
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.snapshot())
