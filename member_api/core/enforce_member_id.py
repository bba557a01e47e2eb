"""Member Identifier Enforcement — validates path identifiers before any storage call.

Invariants:
    - check_member_id is PURE: no IO, raises InvalidMemberIdError or returns MemberId
    - Accepted identifiers are returned exactly as received; storage matches them verbatim
    - Whitespace-only identifiers are blank; inner characters are not inspected
"""

from member_api.core.domain_types import MEMBER_ID_MAX_LENGTH, MemberId
from member_api.core.errors import InvalidMemberIdError


def check_member_id(raw: str | None, max_length: int = MEMBER_ID_MAX_LENGTH) -> MemberId:
    """Return the identifier unchanged, or raise for blank/oversized input."""
    if raw is None or not raw.strip():
        raise InvalidMemberIdError("Member ID cannot be empty")
    if len(raw) > max_length:
        raise InvalidMemberIdError(
            f"Member ID cannot exceed {max_length} characters",
        )
    return MemberId(raw)
