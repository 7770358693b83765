"""Defines the base interface for entity repositories."""

from __future__ import annotations

import abc
from typing import ClassVar, Generic, Protocol, TypeVar


class Identifiable(Protocol):
    """Capability required of every entity stored in a repository.

    The identifier may be None while the entity is transient; repositories
    reject such entities on save.
    """

    id: int | None


E = TypeVar("E", bound=Identifiable)  # Entity type


class Repository(abc.ABC, Generic[E]):
    """Collection of entities keyed by a unique positive integer id."""

    KIND: ClassVar[str]  # e.g., "Customer"
    KIND_PLURAL: ClassVar[str]  # e.g., "Customers"

    @abc.abstractmethod
    def all(self) -> tuple[E, ...]:
        """Return every stored entity in insertion order.

        Returns:
            A snapshot of the stored entities. Later saves and deletes are not
            reflected in it.
        """

    @abc.abstractmethod
    def save(self, item: E) -> None:
        """Add a new entity to the repository.

        Args:
            item: The entity to store.

        Raises:
            MissingArgumentError: If `item` is None.
            IdentifierOutOfRangeError: If `item.id` is unset or less than 1.
            InvalidIdentifierTypeError: If `item.id` is not an int.
            DuplicateRecordError: If an entity with the same id is already stored.
        """

    @abc.abstractmethod
    def delete(self, id: int) -> None:  # pylint: disable=redefined-builtin
        """Remove every entity with the given id.

        Args:
            id: Identifier of the entity to remove.

        Raises:
            MissingArgumentError: If `id` is None.
            IdentifierOutOfRangeError: If `id` is less than 1.
            InvalidIdentifierTypeError: If `id` is not an int.
            NoRecordsSavedError: If the repository is empty.
            RecordNotFoundError: If no entity has the given id.
        """

    @abc.abstractmethod
    def find_by_id(self, id: int) -> E | None:  # pylint: disable=redefined-builtin
        """Find an entity by its id.

        Args:
            id: Identifier to look up.

        Returns:
            The first stored entity with that id, or None if there is none.

        Raises:
            MissingArgumentError: If `id` is None.
            IdentifierOutOfRangeError: If `id` is less than 1.
            InvalidIdentifierTypeError: If `id` is not an int.
        """
