from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from .codec import CHAR_MAX, CHAR_MIN
from .stamp import is_valid


class ErrorEnvelope(BaseModel):
    code: str
    message: str
    details: Optional[dict[str, Any]] = None
    requestId: Optional[str] = None


class ErrorResponse(BaseModel):
    error: ErrorEnvelope


class Health(BaseModel):
    status: str = "ok"


class Version(BaseModel):
    version: str


class FromValueIn(BaseModel):
    value: float
    key: Optional[str] = Field(default=None, max_length=256)

    @field_validator("key")
    @classmethod
    def key_in_alphabet(cls, v: Optional[str]) -> Optional[str]:
        if v and not is_valid(v):
            raise ValueError(f"key characters must be in [{CHAR_MIN}, {CHAR_MAX})")
        return v


class BetweenIn(BaseModel):
    prev: str
    next: str

    @field_validator("prev", "next")
    @classmethod
    def stamp_in_alphabet(cls, v: str) -> str:
        if not is_valid(v):
            raise ValueError(f"stamp must be non-empty with characters in [{CHAR_MIN}, {CHAR_MAX})")
        return v


class BatchIn(BaseModel):
    count: int = Field(ge=1, le=1000)


class StampOut(BaseModel):
    stamp: str


class StampsOut(BaseModel):
    stamps: list[str]
