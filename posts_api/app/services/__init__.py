"""
Service layer abstraction.

Each service encapsulates the logic for one resource.  By isolating
logic here you can swap out the in‑memory store used by this service
for database queries without changing API handlers.
"""
