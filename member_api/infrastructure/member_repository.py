"""SQL Member Repository — reads the highest-version row for a member.

Invariants:
    - Exactly one query per lookup: WHERE member_id = :id ORDER BY version DESC LIMIT 1
    - Every driver, pool or socket failure leaves this module as StorageError
    - A row with a non-integer version or a foreign member_id is malformed → StorageError
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from member_api.core.domain_types import MemberId, MemberRecord
from member_api.core.errors import ErrorContext, StorageError
from member_api.models.member import Member, PAYLOAD_FIELDS

logger = logging.getLogger(__name__)


class SqlMemberRepository:
    """MemberRepository backed by an AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def find_latest(self, member_id: MemberId) -> MemberRecord | None:
        query = (
            select(Member)
            .where(Member.member_id == member_id)
            .order_by(Member.version.desc())
            .limit(1)
        )
        try:
            result = await self._db.execute(query)
            row = result.scalars().first()
        except (SQLAlchemyError, OSError) as e:
            logger.debug(
                f"Member query failed: {e}", extra={"member_id": member_id},
            )
            raise StorageError(
                type(e).__name__, "query", ErrorContext(member_id=member_id),
            ) from e
        if row is None:
            return None
        return _to_record(row, member_id)


def _to_record(row: Member, member_id: MemberId) -> MemberRecord:
    """Convert an ORM row to a MemberRecord, rejecting malformed rows."""
    version = row.version
    if isinstance(version, bool) or not isinstance(version, int):
        raise StorageError(
            f"malformed row: version={version!r}", "decode",
            ErrorContext(member_id=member_id),
        )
    if row.member_id != member_id:
        raise StorageError(
            f"malformed row: member_id={row.member_id!r}", "decode",
            ErrorContext(member_id=member_id),
        )
    return MemberRecord(
        member_id=MemberId(row.member_id),
        version=version,
        payload={name: getattr(row, name) for name in PAYLOAD_FIELDS},
    )
