"""Exception types raised by the resolver layer and its collaborators."""


class ResolverError(Exception):
    """A failed operation, described by one flat message."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationFailed(ResolverError):
    """Input broke one or more validation rules."""

    def __init__(self, errors: list[str]) -> None:
        super().__init__(", ".join(errors))
        self.errors = errors


class RecordNotFound(ResolverError):
    """The addressed record does not exist."""


class DuplicateRecord(ResolverError):
    """A uniqueness rule would be violated."""


class StoreError(Exception):
    """The record store rejected a write."""


class UploadError(Exception):
    """The media host could not store an image."""
