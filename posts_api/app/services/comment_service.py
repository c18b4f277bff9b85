"""
Business logic for comments.

Comments are not backed by any storage.  ``CommentService`` fabricates
the same two sample comments for whichever post id it is asked about,
without checking that the post exists.
"""

from typing import List

from ..schemas.comment import CommentRead


SAMPLE_COMMENTS = [
    {"id": 1, "name": "John Doe", "email": "john@example.com", "body": "Sample comment 1"},
    {"id": 2, "name": "Jane Smith", "email": "jane@example.com", "body": "Sample comment 2"},
]


class CommentService:
    """Сервис комментариев к постам."""

    @classmethod
    async def list_comments(cls, post_id: int) -> List[CommentRead]:
        return [CommentRead(post_id=post_id, **comment) for comment in SAMPLE_COMMENTS]
