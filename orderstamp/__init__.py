"""Sortable string stamps for ordered lists stored one row per item."""
from .codec import CHAR_MAX, CHAR_MIN
from .stamp import (
    RANDOM_SUFFIX_LEN,
    InvalidArgument,
    StampGenerator,
    between,
    common_prefix_len,
    end,
    from_value,
    is_valid,
    random_int,
    random_suffix,
    start,
    value_of,
)

__version__ = "1.0.0"

__all__ = [
    "CHAR_MAX",
    "CHAR_MIN",
    "RANDOM_SUFFIX_LEN",
    "InvalidArgument",
    "StampGenerator",
    "between",
    "common_prefix_len",
    "end",
    "from_value",
    "is_valid",
    "random_int",
    "random_suffix",
    "start",
    "value_of",
]
