"""Core Layer — domain types, errors and pure lookup rules, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or models/
    - All functions are pure and deterministic
"""
