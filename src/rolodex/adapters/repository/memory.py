"""In-memory CustomerRepository implementation."""

from rolodex.domain.customer import Customer
from rolodex.interfaces.repository.repository import Repository

from .memory_base import InMemoryRepositoryBase


class CustomerRepository(InMemoryRepositoryBase[Customer], Repository[Customer]):
    """In-memory repository of customers.

    The iterable passed at construction is copied; the repository never aliases
    caller-owned storage. `all()` returns a snapshot tuple.

    Example:
        ```py
        repo = CustomerRepository([Customer(1, "Joe", "Bloggs")])
        repo.save(Customer(2, "John", "Smith"))
        repo.delete(1)
        assert repo.find_by_id(1) is None
        ```
    """

    KIND = "Customer"
    KIND_PLURAL = "Customers"
