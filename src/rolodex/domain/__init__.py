"""Domain entities for Rolodex."""

from .customer import Customer

__all__ = ["Customer"]
