"""Member Lookup Service — latest-version lookup with an explicit outcome type.

Invariants:
    - Repository injected at construction; the service never opens a session itself
    - StorageError → StorageFailure (returned, not raised); other exceptions propagate
    - No retries: retry policy belongs to the storage collaborator
"""

import logging

from member_api.core.domain_types import (
    Absent, Found, LookupResult, MemberId, StorageFailure,
)
from member_api.core.errors import StorageError
from member_api.core.repository_protocols import MemberRepository

logger = logging.getLogger(__name__)


class MemberLookupService:
    """Resolves a member identifier to its current record."""

    def __init__(self, repository: MemberRepository):
        self._repository = repository

    async def get_latest(self, member_id: MemberId) -> LookupResult:
        """Return Found(record), Absent, or StorageFailure for member_id."""
        try:
            record = await self._repository.find_latest(member_id)
        except StorageError as e:
            logger.debug(
                f"Lookup failed for member: {e.message}",
                extra={"member_id": member_id, "error_code": e.code},
            )
            return StorageFailure(error=e)

        if record is None:
            logger.debug("No member record", extra={"member_id": member_id})
            return Absent(member_id=member_id)

        logger.debug(
            f"Resolved member at version {record.version}",
            extra={"member_id": member_id},
        )
        return Found(record=record)
