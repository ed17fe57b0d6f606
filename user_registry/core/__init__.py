"""Core Layer: pure domain logic, no IO, no FastAPI.

Invariants:
    - No module in core/ imports from services/, api/, schemas/ or infrastructure/
    - Functions are pure and deterministic; the clock is passed in, never read here
"""
