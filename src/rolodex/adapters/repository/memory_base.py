"""Defines the in-memory base class for repositories."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Generic, TypeVar

from rolodex.interfaces.repository.errors import (
    DuplicateRecordError,
    IdentifierOutOfRangeError,
    InvalidIdentifierTypeError,
    MissingArgumentError,
    NoRecordsSavedError,
    RecordNotFoundError,
    UninitialisedCollectionError,
)
from rolodex.interfaces.repository.repository import Identifiable

E = TypeVar("E", bound=Identifiable)  # Entity

logger = logging.getLogger(__name__)

# pylint: disable=redefined-builtin

NO_ID_MESSAGE = "No Id provided"


class InMemoryRepositoryBase(Generic[E]):
    """Shared mechanics for in-memory repositories: all, save, delete, find_by_id.

    The repository owns a private list copied from the iterable given at
    construction. Entities are matched on their `id` attribute by equality,
    using a linear scan in insertion order.
    """

    KIND: str  # e.g., "Customer"
    KIND_PLURAL: str  # e.g., "Customers"

    def __init__(self, items: Iterable[E] | None) -> None:
        if items is None:
            raise UninitialisedCollectionError(self.KIND, self.KIND_PLURAL)
        self._items: list[E] | None = list(items)

    @property
    def _collection(self) -> list[E]:
        if self._items is None:
            raise UninitialisedCollectionError(self.KIND, self.KIND_PLURAL)
        return self._items

    def _check_id(self, id: object, argument: str, out_of_range_message: str) -> int:
        if id is None:
            raise MissingArgumentError(self.KIND, argument)
        if isinstance(id, bool) or not isinstance(id, int):
            raise InvalidIdentifierTypeError(self.KIND, id)
        if id < 1:
            raise IdentifierOutOfRangeError(self.KIND, id, out_of_range_message)
        return id

    def all(self) -> tuple[E, ...]:
        return tuple(self._items or ())

    def save(self, item: E) -> None:
        if item is None:
            raise MissingArgumentError(self.KIND, "item")

        data_message = f"No {self.KIND} data provided"
        if item.id is None:
            raise IdentifierOutOfRangeError(self.KIND, None, data_message)
        id = self._check_id(item.id, "item.id", data_message)

        collection = self._collection

        if self.find_by_id(id) is not None:
            raise DuplicateRecordError(self.KIND, id)

        collection.append(item)
        logger.debug("Saved %s %d (%d stored)", self.KIND, id, len(collection))

    def delete(self, id: int) -> None:
        id = self._check_id(id, "id", NO_ID_MESSAGE)
        collection = self._collection

        if not collection:
            raise NoRecordsSavedError(self.KIND, self.KIND_PLURAL)

        if self.find_by_id(id) is None:
            raise RecordNotFoundError(self.KIND, id)

        # Remove every match; constructor seeds are not checked for duplicates.
        remaining = [item for item in collection if item.id != id]
        removed = len(collection) - len(remaining)
        collection[:] = remaining
        logger.debug(
            "Deleted %s %d (%d removed, %d stored)",
            self.KIND,
            id,
            removed,
            len(collection),
        )

    def find_by_id(self, id: int) -> E | None:
        id = self._check_id(id, "id", NO_ID_MESSAGE)
        return next((item for item in self._collection if item.id == id), None)
