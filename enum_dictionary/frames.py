"""
Frame Conversion
================

This module converts enum items to and from polars DataFrames:
- Export of items as a 'code' / 'name' / 'label' frame
- Import of item definitions from the rows of a frame
"""

from typing import Any, Dict, Iterable, List

import polars as pl

from .config import CODE_FIELD, FRAME_SCHEMA, LABEL_FIELD, NAME_FIELD
from .errors import ValidationError
from .item import EnumItem


def items_to_frame(items: Iterable[Any]) -> pl.DataFrame:
    """
    Build a DataFrame from enum items.

    Args:
        items: Sequence that may contain EnumItem objects; other values are skipped

    Returns:
        DataFrame with the columns of FRAME_SCHEMA, one row per item
    """
    rows = [item for item in items if isinstance(item, EnumItem)]
    data = {
        CODE_FIELD: [item.code for item in rows],
        NAME_FIELD: [item.name for item in rows],
        LABEL_FIELD: [item.label for item in rows],
    }
    return pl.DataFrame(data, schema=FRAME_SCHEMA)


def rows_from_frame(df: pl.DataFrame) -> List[Dict[str, Any]]:
    """
    Extract item definitions from the rows of a DataFrame.

    Columns other than 'code', 'name' and 'label' are kept as extra item data.
    A null code, or a frame without a 'code' column, means the default code.

    Raises:
        ValidationError: If the 'name' or 'label' column is missing
    """
    for column in (NAME_FIELD, LABEL_FIELD):
        if column not in df.columns:
            raise ValidationError(f"Enum frame must contain a '{column}' column")

    definitions = []
    for row in df.iter_rows(named=True):
        if row.get(CODE_FIELD) is None:
            row.pop(CODE_FIELD, None)
        definitions.append(row)
    return definitions
