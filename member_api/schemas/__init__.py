"""Pydantic Schemas — response contracts for API endpoints.

Invariants:
    - Schemas describe the HTTP boundary only; models/ describes persistence
"""
