"""Domain Types — member records and the tagged lookup outcome.

Invariants:
    - MemberId wraps str; routes pass only checked identifiers to the service
    - MemberRecord is immutable; payload is owned by storage and passed through untouched
    - LookupResult is exactly one of Found | Absent | StorageFailure

Design Decisions:
    - Frozen dataclasses for outcomes: callers branch with isinstance, and a storage
      failure is a distinct type from absence
"""

from dataclasses import dataclass, field
from typing import Any, NewType, Union

from member_api.core.errors import StorageError


# ─── Identity Types ──────────────────────────────────────────────

MemberId = NewType("MemberId", str)

# Widest identifier the members table can hold
MEMBER_ID_MAX_LENGTH: int = 64


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class MemberRecord:
    """One stored version of a member."""
    member_id: MemberId
    version: int
    payload: dict[str, Any] = field(default_factory=dict)


# ─── Lookup Outcomes ─────────────────────────────────────────────

@dataclass(frozen=True)
class Found:
    record: MemberRecord


@dataclass(frozen=True)
class Absent:
    member_id: MemberId


@dataclass(frozen=True)
class StorageFailure:
    error: StorageError


LookupResult = Union[Found, Absent, StorageFailure]
