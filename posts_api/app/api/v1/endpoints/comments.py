"""
Comment endpoints for API v1.

Comments hang off a post (``/posts/{post_id}/comments``) but are
generated on the fly; the post itself is never looked up.
"""

from typing import List

from fastapi import APIRouter

from posts_api.app.api.v1.params import parse_int
from posts_api.app.schemas.comment import CommentRead
from posts_api.app.services.comment_service import CommentService

router = APIRouter()


@router.get("/{post_id}/comments", response_model=List[CommentRead])
async def list_comments(post_id: str) -> List[CommentRead]:
    """Return the two sample comments for ``post_id``."""
    return await CommentService.list_comments(parse_int(post_id))
