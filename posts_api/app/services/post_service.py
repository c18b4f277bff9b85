"""
Service layer for posts.

This module provides CRUD operations for posts on top of the shared
in-memory ``store``.  A missing post is reported as ``None`` (or
``False`` for deletions); translating that into an HTTP status is the
job of the API layer.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from posts_api.app.core.store import store
from posts_api.app.schemas.post import PostCreate, PostPatch, PostRead, PostUpdate


class PostService:
    """Service class for managing posts."""

    @classmethod
    async def list_posts(cls, user_id: Optional[int] = None) -> List[PostRead]:
        """Return all posts in storage order.

        When ``user_id`` is given only posts owned by that user are
        returned, still in storage order.
        """
        return store.list_posts(user_id=user_id)

    @classmethod
    async def get_post(cls, post_id: int) -> Optional[PostRead]:
        """Retrieve a single post by its ID."""
        return store.get(post_id)

    @classmethod
    async def create_post(cls, data: PostCreate) -> PostRead:
        """Store a new post under the next free id and return it."""
        logger = logging.getLogger(__name__)
        post = store.add(data)
        logger.info("Created post %s for user %s", post.id, post.user_id)
        return post

    @classmethod
    async def update_post(cls, post_id: int, data: PostUpdate) -> Optional[PostRead]:
        """Replace an existing post.

        Every field is overwritten; the id is always ``post_id``.
        Returns ``None`` if the post does not exist.
        """
        logger = logging.getLogger(__name__)
        post = store.replace(post_id, data)
        if post is not None:
            logger.info("Updated post %s", post_id)
        return post

    @classmethod
    async def patch_post(cls, post_id: int, data: PostPatch) -> Optional[PostRead]:
        """Update only the fields provided in ``data``.

        Returns the updated post or ``None`` if the record does not
        exist.
        """
        logger = logging.getLogger(__name__)
        post = store.patch(post_id, data)
        if post is not None:
            logger.info(
                "Patched post %s (%s)",
                post_id,
                ", ".join(sorted(data.model_dump(exclude_none=True))) or "no changes",
            )
        return post

    @classmethod
    async def delete_post(cls, post_id: int) -> bool:
        """Delete a post by ID.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        logger = logging.getLogger(__name__)
        deleted = store.remove(post_id)
        if deleted:
            logger.info("Deleted post %s", post_id)
        return deleted
