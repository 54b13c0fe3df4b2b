# core/exceptions.py


class LibraryError(Exception):
    """Base class for catalog errors"""
    pass


class ValidationError(LibraryError, ValueError):
    """Raised when a field value violates its constraints on write.

    Args:
        field: Name of the offending field
        message: Human readable description of the violation
    """

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")
