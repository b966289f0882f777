"""Pydantic Schemas — record shapes and error envelopes for the API boundary.

Invariants:
    - Schemas carry the wire field names (livesLeft, not lives_left)
    - Same models drive validation, serialization and the API description
"""
