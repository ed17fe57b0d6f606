"""Services Layer: user policy and DTO/entity mapping.

Invariants:
    - Services raise domain errors from core/errors.py, never HTTPException
"""
