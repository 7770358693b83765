"""Customer entity."""

from dataclasses import dataclass


@dataclass(slots=True)
class Customer:
    """A customer record held by a repository.

    Conventions:
      - `id` is a positive integer once saved; `None` marks a transient
        customer that has not been given an identifier yet.
      - `first_name` and `surname` are free text.
    """

    id: int | None = None
    first_name: str | None = None
    surname: str | None = None
