"""Repository interface and related errors."""

from .errors import (
    DuplicateRecordError,
    IdentifierOutOfRangeError,
    InvalidIdentifierTypeError,
    InvalidOperationError,
    MissingArgumentError,
    NoRecordsSavedError,
    RecordNotFoundError,
    RepositoryError,
    UninitialisedCollectionError,
)
from .repository import Identifiable, Repository

__all__ = [
    "Identifiable",
    "Repository",
    "RepositoryError",
    "MissingArgumentError",
    "IdentifierOutOfRangeError",
    "InvalidIdentifierTypeError",
    "UninitialisedCollectionError",
    "InvalidOperationError",
    "NoRecordsSavedError",
    "RecordNotFoundError",
    "DuplicateRecordError",
]
