"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas validate at the HTTP boundary only (decoding and typing)
    - Presence rules live in core/, so they report their own error message
"""
