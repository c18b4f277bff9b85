"""
Top‑level router for version 1 of the API.

This router aggregates resource routers (posts and their comments)
under the ``/posts`` prefix.  When new resources are added, update this
file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import comments, posts

router = APIRouter()

router.include_router(posts.router, prefix="/posts", tags=["posts"])
# Comments live under a post's URL, so they share the ``/posts`` prefix.
router.include_router(comments.router, prefix="/posts", tags=["comments"])
