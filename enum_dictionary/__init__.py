"""
Enum Dictionary
===============

This package provides immutable enum dictionaries for closed sets of business
constants (status codes, types, ...):
- Items identified by a numeric code, a symbolic name and a display label
- Lookup of any identifier from any other
- Sequential default codes and duplicate code / name detection
- Export as lists for select controls, or as polars DataFrames

Every item handed out is a copy, so callers cannot alter a dictionary once an
item has been added.
"""

# Core enum dictionary classes
from .dictionary import EnumDictionary
from .item import EnumItem, parse_definition
from .code_allocator import CodeAllocator
from .mapping_manager import MappingManager

# Errors
from .errors import (
    EnumDictionaryError,
    ValidationError,
    DuplicateKeyError
)

__all__ = [
    'EnumDictionary',
    'EnumItem',
    'parse_definition',
    'CodeAllocator',
    'MappingManager',
    'EnumDictionaryError',
    'ValidationError',
    'DuplicateKeyError'
]
