"""User Registry: in-memory user management service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
