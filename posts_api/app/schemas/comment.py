"""Pydantic schemas for comments.

Comments are never stored; they are generated on request for a given
post id.
"""

from pydantic import BaseModel, ConfigDict, Field


class CommentRead(BaseModel):
    """Schema for reading a comment."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    post_id: int = Field(..., alias="postId")
    name: str
    email: str
    body: str
