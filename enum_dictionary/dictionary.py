"""
Enum Dictionary Module
======================

This module provides the main enum dictionary that coordinates code allocation,
the code <-> name mapping and the item indexes, and provides a unified interface
for enum lookups.

An enum dictionary maps numbers to their business meaning. For example:

    Status = EnumDictionary(
        {'name': 'NORMAL', 'label': '正常'},
        {'name': 'DISABLED', 'label': '禁用'},
        {'name': 'DELETED', 'label': '已删除'}
    )

Codes start at 0 and follow definition order. Enums with non sequential codes
pass an explicit ``code`` on the items that need one:

    MouseButton = EnumDictionary(
        {'name': 'LEFT', 'label': '左键', 'code': 1},
        {'name': 'RIGHT', 'label': '右键', 'code': 2},
        {'name': 'MIDDLE', 'label': '中键', 'code': 4}
    )
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

import polars as pl

from .code_allocator import CodeAllocator
from .frames import items_to_frame, rows_from_frame
from .item import EnumItem, is_code, parse_definition
from .mapping_manager import MappingManager


class EnumDictionary:
    """
    Immutable registry of enum items indexed by code, name and label.

    Codes and names are unique. Labels are not: when two items share a label,
    the label index keeps the most recently added one.
    """

    def __init__(self, *definitions):
        self.code_allocator = CodeAllocator()
        self.mapping_manager = MappingManager()

        self._by_code: Dict[int, EnumItem] = {}
        self._by_name: Dict[str, EnumItem] = {}
        self._by_label: Dict[str, EnumItem] = {}

        for definition in definitions:
            self.add_element(definition)

    @classmethod
    def from_frame(cls, df: pl.DataFrame) -> 'EnumDictionary':
        """
        Build an enum dictionary from a DataFrame with 'name', 'label' and
        optionally 'code' columns. Rows are added in frame order.
        """
        rows = rows_from_frame(df)
        enum_dict = cls(*rows)
        logging.info(f"Loaded enum dictionary from frame: {len(enum_dict)} items")
        return enum_dict

    def add_element(self, definition) -> EnumItem:
        """
        Add an item to the enum dictionary.

        Args:
            definition: Mapping with 'name', 'label' and optionally 'code', or an EnumItem

        Returns:
            Copy of the stored item, with its resolved code

        Raises:
            ValidationError: If the definition is malformed
            DuplicateKeyError: If the code or the name is already defined
        """
        item = parse_definition(definition)

        # Both checks run before any index is touched
        item.code = self.code_allocator.resolve_code(item.code)
        self.mapping_manager.check_name(item.name)

        self.code_allocator.allocate(item.code)
        self.mapping_manager.add_mapping(item.code, item.name)

        self._by_code[item.code] = item
        self._by_name[item.name] = item
        self._by_label[item.label] = item

        logging.debug(f"Added enum item {item.name} (code {item.code})")
        return item.copy()

    def from_code(self, code: int) -> Optional[EnumItem]:
        """
        Get the item with the given code.

        Returns:
            Copy of the item if exists, None otherwise
        """
        if not is_code(code):
            return None
        item = self._by_code.get(code)
        return item.copy() if item is not None else None

    def from_name(self, name: str) -> Optional[EnumItem]:
        """
        Get the item with the given name.

        Returns:
            Copy of the item if exists, None otherwise
        """
        if not isinstance(name, str):
            return None
        item = self._by_name.get(name)
        return item.copy() if item is not None else None

    def from_label(self, label: str) -> Optional[EnumItem]:
        """
        Get the most recently added item with the given label.

        Returns:
            Copy of the item if exists, None otherwise
        """
        if not isinstance(label, str):
            return None
        item = self._by_label.get(label)
        return item.copy() if item is not None else None

    def get_label_from_code(self, code: int) -> Optional[str]:
        item = self.from_code(code)
        return item.label if item else None

    def get_label_from_name(self, name: str) -> Optional[str]:
        item = self.from_name(name)
        return item.label if item else None

    def get_code_from_name(self, name: str) -> Optional[int]:
        item = self.from_name(name)
        return item.code if item else None

    def get_code_from_label(self, label: str) -> Optional[int]:
        item = self.from_label(label)
        return item.code if item else None

    def get_name_from_code(self, code: int) -> Optional[str]:
        item = self.from_code(code)
        return item.name if item else None

    def get_name_from_label(self, label: str) -> Optional[str]:
        item = self.from_label(label)
        return item.name if item else None

    def name_of(self, code: int) -> Optional[str]:
        """
        Get the name mapped to the given code, e.g. ``Status.name_of(2) == 'DELETED'``.
        """
        if not is_code(code):
            return None
        return self.mapping_manager.get_name(code)

    def code_of(self, name: str) -> Optional[int]:
        """
        Get the code mapped to the given name, e.g. ``Status.code_of('DELETED') == 2``.
        """
        if not isinstance(name, str):
            return None
        return self.mapping_manager.get_code(name)

    def to_list(self, *hints) -> List[Any]:
        """
        Convert the enum dictionary to a list, typically as the data source of a
        select control.

        Args:
            *hints: Optional layout of the list. A string is replaced by the item
                with that name (None if there is no such item); any other value
                is inserted as is. Without hints every item is returned, ordered
                by code.

        Returns:
            A new list on every call
        """
        if hints:
            return [self.from_name(hint) if isinstance(hint, str) else hint for hint in hints]

        # Codes are not necessarily contiguous, only existing ones are listed
        return [self._by_code[code].copy() for code in self.code_allocator.sorted_codes()]

    def to_frame(self, *hints) -> pl.DataFrame:
        """
        Convert the enum dictionary to a DataFrame with 'code', 'name' and 'label'
        columns. Hints work as in ``to_list``, except that unknown names and
        values that are not items are left out.
        """
        return items_to_frame(self.to_list(*hints))

    def __len__(self) -> int:
        return self.code_allocator.get_allocated_count()

    def __contains__(self, key) -> bool:
        if isinstance(key, str):
            return self.mapping_manager.has_name(key)
        if is_code(key):
            return self.mapping_manager.has_code(key)
        return False

    def __iter__(self) -> Iterator[EnumItem]:
        return iter(self.to_list())

    def __repr__(self) -> str:
        names = ', '.join(f"{item.name}={item.code}" for item in self.to_list())
        return f"EnumDictionary({names})"
