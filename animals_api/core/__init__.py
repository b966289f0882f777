"""Core Layer — pure domain logic, no IO, no HTTP, no framework state.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - Validation is a pure function of its input

Design Decisions:
    - Functional core separated from the FastAPI shell: routes branch on
      results produced here
"""
