"""API Layer — FastAPI routes, error handlers and API description.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All error responses are JSON objects with a string "error" key
"""
