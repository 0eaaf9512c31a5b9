"""
Errors raised while building an enum dictionary.

Lookups never raise: an unknown code, name or label is reported as ``None``.
"""

from .config import CODE_FIELD


class EnumDictionaryError(ValueError):
    """Base class for all enum dictionary errors."""
    pass


class ValidationError(EnumDictionaryError):
    """Raised when an item definition is missing a field or has the wrong shape."""
    pass


class DuplicateKeyError(EnumDictionaryError):
    """Raised when a code or name is already defined in the dictionary."""

    def __init__(self, field: str, key):
        self.field = field
        self.key = key
        if field == CODE_FIELD:
            message = f"Already defined an element with code {key} in this enum type"
        else:
            message = f"Already defined an element with name '{key}' in this enum type"
        super().__init__(message)
