"""
Pydantic schema definitions for API payloads.

Schemas describe the JSON shape of joke records and of the simple
``{"message": ...}`` responses returned by the API.
"""
