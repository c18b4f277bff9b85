"""
In-memory post storage.

``PostStore`` keeps posts in insertion order, keyed by id, together
with the counter used to assign ids to new posts.  Every read and
mutation runs under a lock so that concurrent requests never observe
a half-applied change or hand out the same id twice.  Callers always
receive copies; the stored records are never exposed directly.

The module exposes a process-wide ``store`` instance and ``init_store``
which loads the sample data on application start.  Nothing is
persisted; restarting the process resets the store.
"""

import threading
from typing import Dict, Iterable, List, Optional

from posts_api.app.schemas.post import PostCreate, PostPatch, PostRead


SAMPLE_POSTS = [
    PostRead(id=1, user_id=1, title="Sample Post", body="This is a sample post"),
]


class PostStore:
    """Ordered, lock-guarded collection of posts plus the id counter."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._posts: Dict[int, PostRead] = {}
        self._next_id = 1

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def reset(self, posts: Iterable[PostRead] = ()) -> None:
        """Replace the contents with ``posts``.

        The counter continues after the highest loaded id, or starts at
        1 when the store ends up empty.
        """
        with self._lock:
            self._posts = {post.id: post.model_copy() for post in posts}
            self._next_id = max(self._posts, default=0) + 1

    def list_posts(self, user_id: Optional[int] = None) -> List[PostRead]:
        with self._lock:
            return [
                post.model_copy()
                for post in self._posts.values()
                if user_id is None or post.user_id == user_id
            ]

    def get(self, post_id: int) -> Optional[PostRead]:
        with self._lock:
            post = self._posts.get(post_id)
            return post.model_copy() if post is not None else None

    def add(self, data: PostCreate) -> PostRead:
        with self._lock:
            post = PostRead(id=self._next_id, user_id=data.user_id, title=data.title, body=data.body)
            self._next_id += 1
            self._posts[post.id] = post
            return post.model_copy()

    def replace(self, post_id: int, data: PostCreate) -> Optional[PostRead]:
        """Overwrite every field of an existing post, keeping its id and position."""
        with self._lock:
            if post_id not in self._posts:
                return None
            post = PostRead(id=post_id, user_id=data.user_id, title=data.title, body=data.body)
            self._posts[post_id] = post
            return post.model_copy()

    def patch(self, post_id: int, changes: PostPatch) -> Optional[PostRead]:
        """Apply the non-``None`` fields of ``changes`` to an existing post."""
        with self._lock:
            post = self._posts.get(post_id)
            if post is None:
                return None
            if changes.title is not None:
                post.title = changes.title
            if changes.body is not None:
                post.body = changes.body
            if changes.user_id is not None:
                post.user_id = changes.user_id
            return post.model_copy()

    def remove(self, post_id: int) -> bool:
        with self._lock:
            return self._posts.pop(post_id, None) is not None


store = PostStore()


def init_store(seed: bool = True) -> None:
    """Load the sample posts into the shared store, or empty it."""
    store.reset(SAMPLE_POSTS if seed else ())
