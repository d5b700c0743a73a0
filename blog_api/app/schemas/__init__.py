"""
Pydantic schema definitions for API payloads.

Schemas are separated from the in‑memory records so that the API
representation (for example the ``createdAt`` field name) stays
decoupled from storage.
"""
