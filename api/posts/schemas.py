"""
Pydantic schemas for post endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

TITLE_MAX_LENGTH = 255


class PostWriteRequest(BaseModel):
    """
    Full title/body pair used by both create and update.

    Surrounding whitespace is stripped before the length checks, so a blank
    field is rejected the same way as an empty one. Unknown fields are ignored.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1, max_length=TITLE_MAX_LENGTH)
    body: str = Field(..., min_length=1)

    @field_validator("title", "body")
    @classmethod
    def _reject_nul(cls, value: str) -> str:
        # PostgreSQL text columns cannot store NUL.
        if "\x00" in value:
            raise PydanticCustomError("string_nul", "String must not contain NUL characters")
        return value


class PostResponse(BaseModel):
    id: int
    title: str
    body: str
    created_at: datetime
    updated_at: datetime
