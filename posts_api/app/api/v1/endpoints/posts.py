"""
Post endpoints for API v1.

These routes expose a CRUD API for posts kept in the in-memory store.
Ids in the URL are parsed leniently (see ``params.parse_int``), so a
non-numeric id simply refers to post ``0``.  Bodies are decoded by
``params.json_object_body`` regardless of their ``Content-Type``.  A
missing post yields a plain-text ``404 Post not found``.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from posts_api.app.api.v1.params import json_object_body, parse_int
from posts_api.app.schemas.post import PostCreate, PostPatch, PostRead, PostUpdate
from posts_api.app.services.post_service import PostService

router = APIRouter()

POST_NOT_FOUND = "Post not found"


@router.get("", response_model=List[PostRead])
async def list_posts(
    user_id: Optional[str] = Query(None, alias="userId", description="Only return posts of this user"),
) -> List[PostRead]:
    """Return all posts, optionally filtered by owner.

    An absent or empty ``userId`` returns every post.  The response is
    always a JSON array, empty if nothing matches.
    """
    if user_id:
        return await PostService.list_posts(user_id=parse_int(user_id))
    return await PostService.list_posts()


@router.get("/{post_id}", response_model=PostRead)
async def get_post(post_id: str) -> PostRead:
    """Retrieve a single post by ID."""
    post = await PostService.get_post(parse_int(post_id))
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)
    return post


@router.post("", response_model=PostRead, status_code=status.HTTP_201_CREATED)
async def create_post(payload: Optional[Dict[str, Any]] = Depends(json_object_body)) -> PostRead:
    """Create a new post.

    Missing fields default to zero values and an empty body creates an
    empty post.  The id is assigned by the server.
    """
    return await PostService.create_post(PostCreate.model_validate(payload or {}))


@router.put("/{post_id}", response_model=PostRead)
async def update_post(
    post_id: str,
    payload: Optional[Dict[str, Any]] = Depends(json_object_body),
) -> PostRead:
    """Replace an existing post; the id in the URL wins over any id in the body."""
    post = await PostService.update_post(parse_int(post_id), PostUpdate.model_validate(payload or {}))
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)
    return post


@router.patch("/{post_id}", response_model=PostRead)
async def patch_post(
    post_id: str,
    payload: Optional[Dict[str, Any]] = Depends(json_object_body),
) -> PostRead:
    """Update ``title``, ``body`` and/or ``userId`` of an existing post.

    Unknown or mistyped fields are ignored.
    """
    post = await PostService.patch_post(parse_int(post_id), PostPatch.model_validate(payload or {}))
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)
    return post


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: str) -> None:
    """Delete a post."""
    deleted = await PostService.delete_post(parse_int(post_id))
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=POST_NOT_FOUND)
    return None
