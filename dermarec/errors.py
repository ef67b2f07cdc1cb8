from typing import Optional


class DermarecError(Exception):
    """Base class for engine errors."""
    pass


class ProfileValidationError(DermarecError):
    """Raised when a profile payload cannot be read at all (e.g. not a mapping)."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.message = message
        self.field = field
        super().__init__(message)


class ReferenceDataError(DermarecError):
    """Raised at import time when the static reference tables are inconsistent."""
    pass
