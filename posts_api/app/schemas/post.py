"""
Pydantic schemas for posts.

A post belongs to a user (``userId``) and carries a title and a body.
Request schemas are deliberately lenient: fields that are missing or
have the wrong JSON type fall back to zero values instead of failing
validation, mirroring how clients of this API have always been
treated.  Partial updates use ``PostPatch`` whose fields are all
optional; a mistyped field there is dropped rather than zeroed.
"""

import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _as_int(value: Any, truncate: bool) -> Optional[int]:
    # bool is a subclass of int but not a JSON number
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and math.isfinite(value):
        if truncate or value.is_integer():
            value = int(value)
    if isinstance(value, int) and INT64_MIN <= value <= INT64_MAX:
        return value
    return None


class PostCreate(BaseModel):
    """Schema for creating a post.

    Any ``id`` sent by the client is ignored; the store assigns ids.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(0, alias="userId", description="Identifier of the owning user")
    title: str = Field("", description="Post title")
    body: str = Field("", description="Post body")

    @field_validator("title", "body", mode="before")
    @classmethod
    def zero_mistyped_text(cls, v):
        text = _as_str(v)
        return "" if text is None else text

    @field_validator("user_id", mode="before")
    @classmethod
    def zero_mistyped_user_id(cls, v):
        number = _as_int(v, truncate=False)
        return 0 if number is None else number


class PostUpdate(PostCreate):
    """Schema for replacing a post (``PUT``).

    The stored id always comes from the URL path, never from the body.
    """


class PostPatch(BaseModel):
    """Schema for partially updating a post (``PATCH``).

    All fields are optional; only provided, correctly typed values are
    applied.  Unknown keys are ignored.
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[int] = Field(None, alias="userId")
    title: Optional[str] = None
    body: Optional[str] = None

    @field_validator("title", "body", mode="before")
    @classmethod
    def drop_mistyped_text(cls, v):
        return _as_str(v)

    @field_validator("user_id", mode="before")
    @classmethod
    def drop_mistyped_user_id(cls, v):
        return _as_int(v, truncate=True)


class PostRead(BaseModel):
    """Schema for reading a post."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    user_id: int = Field(..., alias="userId")
    title: str
    body: str
