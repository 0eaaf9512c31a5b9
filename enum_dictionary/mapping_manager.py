"""
Mapping Manager Module
======================

This module manages the bidirectional mapping between item codes and item names,
ensuring efficient lookup in both directions with O(1) performance.
"""

from typing import Dict, Optional

from .config import NAME_FIELD
from .errors import DuplicateKeyError


class MappingManager:
    """
    Manages the code <-> name mapping of a single enum dictionary.
    """

    def __init__(self):
        self._code_to_name: Dict[int, str] = {}
        self._name_to_code: Dict[str, int] = {}

    def check_name(self, name: str):
        """
        Ensure the given name is not mapped yet.

        Raises:
            DuplicateKeyError: If the name is already mapped to a code
        """
        if name in self._name_to_code:
            raise DuplicateKeyError(NAME_FIELD, name)

    def add_mapping(self, code: int, name: str):
        """
        Add a bidirectional mapping between code and name.

        Args:
            code: Item code
            name: Item name
        """
        self._code_to_name[code] = name
        self._name_to_code[name] = code

    def get_name(self, code: int) -> Optional[str]:
        """
        Get the name for the given code.

        Args:
            code: Item code

        Returns:
            Name if exists, None otherwise
        """
        return self._code_to_name.get(code)

    def get_code(self, name: str) -> Optional[int]:
        """
        Get the code for the given name.

        Args:
            name: Item name

        Returns:
            Code if exists, None otherwise
        """
        return self._name_to_code.get(name)

    def has_code(self, code: int) -> bool:
        return code in self._code_to_name

    def has_name(self, name: str) -> bool:
        return name in self._name_to_code
