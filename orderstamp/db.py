from __future__ import annotations

from typing import Optional

from sqlalchemy import LargeBinary
from sqlalchemy.engine import Dialect
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.types import TypeDecorator


class StampType(TypeDecorator):
    """Stores a stamp as bytes, one byte per character.

    Text columns sort by collation, which may not follow code points. Binary
    columns compare byte by byte, and since every stamp character is below
    256 the database order is the same as Python string order.
    """

    impl = LargeBinary
    cache_ok = True

    def process_bind_param(self, value: Optional[str], dialect: Dialect) -> Optional[bytes]:
        if value is None:
            return None
        return value.encode("latin-1")

    def process_result_value(self, value: Optional[bytes], dialect: Dialect) -> Optional[str]:
        if value is None:
            return None
        return bytes(value).decode("latin-1")


class SortKeyMixin:
    """Adds an indexed ``sort_key`` stamp column to a declarative model."""

    sort_key: Mapped[str] = mapped_column(StampType(), index=True)
