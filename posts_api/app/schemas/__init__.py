"""
Pydantic schema definitions for API payloads.

Each resource (posts, comments) defines its own Pydantic models for
request and response bodies.  Schemas are separated from the store to
decouple API representation from how records are kept in memory.
"""
