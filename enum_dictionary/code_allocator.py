"""
Code Allocator Module
=====================

This module tracks the numeric codes used by an enum dictionary and assigns a
default code to items defined without one. Codes are immutable once allocated.

The default code is the number of codes allocated so far, so a dictionary
defined without explicit codes is numbered 0, 1, 2, ... in definition order.
This is not "largest code + 1": mixing explicit and default codes can yield a
default code that is already taken, which is then reported as a duplicate.
"""

from typing import Optional, Set

from .config import CODE_FIELD
from .errors import DuplicateKeyError


class CodeAllocator:
    """
    Manages code allocation for a single enum dictionary.
    """

    def __init__(self):
        self.allocated_codes: Set[int] = set()

    def resolve_code(self, requested_code: Optional[int]) -> int:
        """
        Resolve the code an item will be stored under.

        Args:
            requested_code: Explicit code from the item definition, or None

        Returns:
            The explicit code, or the next default code

        Raises:
            DuplicateKeyError: If the resolved code is already allocated
        """
        code = self.get_next_default_code() if requested_code is None else requested_code
        if code in self.allocated_codes:
            raise DuplicateKeyError(CODE_FIELD, code)
        return code

    def allocate(self, code: int):
        """
        Mark the given code as permanently allocated.
        """
        self.allocated_codes.add(code)

    def get_allocated_count(self) -> int:
        return len(self.allocated_codes)

    def get_next_default_code(self) -> int:
        """
        Get the code that an item without an explicit code would receive.
        """
        return len(self.allocated_codes)

    def sorted_codes(self):
        """
        Get all allocated codes in ascending order.
        """
        return sorted(self.allocated_codes)
