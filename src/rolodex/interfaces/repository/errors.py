"""Errors raised by repositories."""

# ============================================================================
#                           General repository errors
# ============================================================================


class RepositoryError(Exception):
    """Base class for all repository-related errors.

    Attributes:
        kind (str): Entity kind the repository manages (e.g. "Customer").
    """

    def __init__(self, kind: str, message: str | None = None) -> None:
        if message is None:
            message = f"{kind} repository error"
        super().__init__(message)
        self.kind = kind


# ============================================================================
#                           Argument errors
# ============================================================================


class MissingArgumentError(RepositoryError, ValueError):
    """Raised when a required argument is absent (None).

    Attributes:
        argument (str): Name of the missing argument.
    """

    def __init__(self, kind: str, argument: str) -> None:
        super().__init__(kind, f"Argument '{argument}' must not be None")
        self.argument = argument


class IdentifierOutOfRangeError(RepositoryError, ValueError):
    """Raised when an identifier is unset or not a positive integer.

    Attributes:
        value (int | None): The rejected identifier.
    """

    def __init__(self, kind: str, value: int | None, message: str) -> None:
        super().__init__(kind, message)
        self.value = value


class InvalidIdentifierTypeError(RepositoryError, TypeError):
    """Raised when an identifier is not an integer.

    Attributes:
        value (object): The rejected identifier.
    """

    def __init__(self, kind: str, value: object) -> None:
        super().__init__(
            kind,
            f"{kind} id must be an int, got {type(value).__name__} ({value!r})",
        )
        self.value = value


# ============================================================================
#                           State errors
# ============================================================================


class UninitialisedCollectionError(RepositoryError, RuntimeError):
    """Raised when the repository's backing collection is missing."""

    def __init__(self, kind: str, kind_plural: str) -> None:
        super().__init__(kind, f"{kind_plural} collection not initialised")


class InvalidOperationError(RepositoryError):
    """Base class for business-rule violations on the stored collection."""


class NoRecordsSavedError(InvalidOperationError):
    """Raised when deleting from an empty repository."""

    def __init__(self, kind: str, kind_plural: str) -> None:
        super().__init__(kind, f"No {kind_plural} saved")


class RecordNotFoundError(InvalidOperationError):
    """Raised when deleting an identifier that is not stored.

    Attributes:
        id (int): The identifier that was not found.
    """

    def __init__(self, kind: str, id: int) -> None:  # pylint: disable=redefined-builtin
        super().__init__(kind, f"{kind} does not exist")
        self.id = id


class DuplicateRecordError(InvalidOperationError):
    """Raised when saving an entity whose identifier is already stored.

    Attributes:
        id (int): The conflicting identifier.
    """

    def __init__(self, kind: str, id: int) -> None:  # pylint: disable=redefined-builtin
        super().__init__(kind, f"{kind} already exists")
        self.id = id
