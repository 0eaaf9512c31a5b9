"""
Enum Item Module
================

This module defines the value type stored by an enum dictionary. Each item is a
(code, name, label) triple:
- code: numeric value of the item
- name: symbolic name, usually upper case with underscores (e.g. 'DISABLED')
- label: text shown to users (e.g. '禁用')

Any other keys found on a definition are kept in ``extra`` so that callers can
attach their own data to an item.
"""

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .config import CODE_FIELD, CODE_MAX, CODE_MIN, ITEM_FIELDS, LABEL_FIELD, NAME_FIELD
from .errors import ValidationError


@dataclass
class EnumItem:
    """
    A single enum item. Instances handed out by an enum dictionary are always
    copies, so they can be modified freely.
    """

    name: str
    label: str
    code: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def copy(self) -> 'EnumItem':
        """
        Return an independent copy of this item, including a deep copy of ``extra``.
        """
        return EnumItem(
            name=self.name,
            label=self.label,
            code=self.code,
            extra=copy.deepcopy(self.extra)
        )


def is_code(value) -> bool:
    """
    Check whether a value can be used as an item code. bool is a subclass of
    int but never a code.
    """
    return isinstance(value, int) and not isinstance(value, bool)


def parse_definition(definition) -> EnumItem:
    """
    Build a fresh EnumItem from an item definition.

    Args:
        definition: Mapping with 'name', 'label' and optionally 'code', or an EnumItem

    Returns:
        New EnumItem that shares no mutable state with the definition

    Raises:
        ValidationError: If the definition is not a mapping or has invalid fields
    """
    if isinstance(definition, EnumItem):
        item = definition.copy()
    elif isinstance(definition, Mapping):
        extra = {key: copy.deepcopy(value) for key, value in definition.items() if key not in ITEM_FIELDS}
        item = EnumItem(
            name=definition.get(NAME_FIELD),
            label=definition.get(LABEL_FIELD),
            code=definition.get(CODE_FIELD),
            extra=extra
        )
    else:
        raise ValidationError("Argument definition is not provided")

    if not isinstance(item.label, str):
        raise ValidationError(f'Enum item must contain a "{LABEL_FIELD}" property of type string')

    if not isinstance(item.name, str):
        raise ValidationError(f'Enum item must contain a "{NAME_FIELD}" property of type string')

    if item.code is not None:
        if not is_code(item.code):
            raise ValidationError(f'Enum item "{CODE_FIELD}" must be an integer, got {item.code!r}')
        if not CODE_MIN <= item.code <= CODE_MAX:
            raise ValidationError(f'Enum item "{CODE_FIELD}" must be between {CODE_MIN} and {CODE_MAX}, got {item.code}')

    return item
