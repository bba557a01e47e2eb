"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Storage failures surface as StorageError, never as a None return

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no base class
"""

from typing import Protocol

from member_api.core.domain_types import MemberId, MemberRecord


class MemberRepository(Protocol):
    """Contract for member record reads, implemented by shell."""
    async def find_latest(self, member_id: MemberId) -> MemberRecord | None: ...
