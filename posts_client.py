"""Posts API client.

This module defines a simple client wrapper around the Posts REST API.
The client uses the ``requests`` library internally to make HTTP calls
and exposes one high‑level method per operation:

* :meth:`list_posts` – return all posts, optionally for one user.
* :meth:`get_post` – fetch a single post by its identifier.
* :meth:`create_post` – create a new post.
* :meth:`update_post` – replace an existing post.
* :meth:`patch_post` – change selected fields of a post.
* :meth:`delete_post` – remove a post.
* :meth:`list_comments` – fetch the comments of a post.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with keys ``status_code`` and ``message``.  Network problems are
reported the same way with ``status_code`` set to ``None``, so callers
never have to catch ``requests`` exceptions themselves.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PostsAPI:
    """Client for interacting with the Posts API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:8080",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, e.g. ``http://localhost:8080``.
            timeout: Timeout in seconds applied to every request.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PATCH``, ``DELETE``, etc.).
            path: Path relative to :attr:`base_url` (e.g. ``/posts``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request (for POST/PUT/PATCH).
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON
            response, or ``None`` for responses without a body.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            # The server reports errors as plain text, e.g. "Post not found".
            message = exc.response.text.strip() if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Post operations
    # ------------------------------------------------------------------
    def list_posts(self, user_id: Optional[int] = None) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all posts, or only those of ``user_id``."""
        params = {"userId": user_id} if user_id is not None else None
        data, error = self._request("GET", "/posts", params=params)
        if error:
            return [], error
        return data or [], None

    def get_post(self, post_id: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single post by ID."""
        return self._request("GET", f"/posts/{post_id}")

    def create_post(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a post.

        Args:
            payload: Post fields (``userId``, ``title``, ``body``).  Missing
                fields are stored as zero values by the server.
        """
        return self._request("POST", "/posts", json_body=payload)

    def update_post(self, post_id: int, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace a post entirely; fields left out of ``payload`` are reset."""
        return self._request("PUT", f"/posts/{post_id}", json_body=payload)

    def patch_post(self, post_id: int, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Change only the fields present in ``payload``."""
        return self._request("PATCH", f"/posts/{post_id}", json_body=payload)

    def delete_post(self, post_id: int) -> Tuple[bool, Optional[Error]]:
        """Delete a post.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/posts/{post_id}")
        if error:
            return False, error
        return True, None

    # ------------------------------------------------------------------
    # Comment operations
    # ------------------------------------------------------------------
    def list_comments(self, post_id: int) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve the comments of a post."""
        data, error = self._request("GET", f"/posts/{post_id}/comments")
        if error:
            return [], error
        return data or [], None
