"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON bodies, except the 204 modify response

Design Decisions:
    - Thin routes delegate validation to core/
"""
