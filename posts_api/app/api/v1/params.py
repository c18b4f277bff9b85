"""
Lenient parsing of request parameters and bodies.

Post ids and user id filters arrive as raw strings and are never
rejected: anything that is not a plain decimal integer (optionally
signed) is treated as ``0``.  Values outside the signed 64-bit range
are treated as ``0`` as well.

Request bodies are decoded as JSON whatever ``Content-Type`` the
client sent.  Only a body that is not valid JSON, or not a JSON
object, is rejected.
"""

import json
import re
from typing import Any, Dict, Optional

from fastapi import HTTPException, Request, status

from posts_api.app.schemas.post import INT64_MAX, INT64_MIN

INVALID_BODY = "Invalid JSON body"

_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(value: str) -> int:
    """Parse ``value`` as a decimal integer, returning 0 on failure."""
    if not _INT_RE.fullmatch(value):
        return 0
    number = int(value)
    if number < INT64_MIN or number > INT64_MAX:
        return 0
    return number


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are accepted by the json module but are not JSON
    raise ValueError(f"{name} is not valid JSON")


async def json_object_body(request: Request) -> Optional[Dict[str, Any]]:
    """FastAPI dependency returning the request body as a JSON object.

    An empty body and a literal ``null`` both yield ``None``.  Anything
    else that does not decode to a JSON object raises ``400``.
    """
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        payload = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_BODY)
    if payload is not None and not isinstance(payload, dict):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=INVALID_BODY)
    return payload
