"""Pytest fixtures for CustomerRepository contract tests.

Provided fixtures
-----------------
- **repo_factory**: Parametrized factory that builds a **fresh** customer
  repository from an iterable of customers. Currently supports `"memory"`
  (the in-memory implementation). To exercise additional implementations
  later, add their keys to the `params` list and branch in the fixture body.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

import pytest

from rolodex.adapters.repository.memory import CustomerRepository

if TYPE_CHECKING:
    from rolodex.domain.customer import Customer
    from rolodex.interfaces.repository import Repository


@pytest.fixture(params=["memory"])
def repo_factory(
    request: pytest.FixtureRequest,
) -> Callable[[Iterable[Customer]], Repository[Customer]]:
    """Return a factory building customer repositories for the requested backend.

    Current params:
      - `"memory"` → `CustomerRepository` (non-durable, in-memory)
    """

    match request.param:
        case "memory":
            return CustomerRepository
        case _:
            raise ValueError(f"unknown repository type: {request.param}")


@pytest.fixture
def empty_repo(repo_factory) -> Repository[Customer]:
    """A repository seeded with nothing."""
    return repo_factory([])


@pytest.fixture
def seeded_repo(repo_factory, joe_bloggs, john_smith) -> Repository[Customer]:
    """A repository seeded with Joe Bloggs (#1) and John Smith (#2)."""
    return repo_factory([joe_bloggs, john_smith])
