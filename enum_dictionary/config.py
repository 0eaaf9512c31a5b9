import polars as pl

# Item field names
CODE_FIELD = 'code'
NAME_FIELD = 'name'
LABEL_FIELD = 'label'
ITEM_FIELDS = (CODE_FIELD, NAME_FIELD, LABEL_FIELD)

# Frame export configuration
FRAME_SCHEMA = {
    CODE_FIELD: pl.Int64,
    NAME_FIELD: pl.Utf8,
    LABEL_FIELD: pl.Utf8,
}

# Codes must fit the Int64 code column
CODE_MIN = -2 ** 63
CODE_MAX = 2 ** 63 - 1
