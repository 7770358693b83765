"""ROLODEX

An in-memory customer repository with strict input validation and
duplicate/missing-record guards.
"""

from rolodex.adapters.repository.memory import CustomerRepository
from rolodex.domain.customer import Customer

__all__ = ["__version__", "Customer", "CustomerRepository"]
__version__ = "0.1.0"
