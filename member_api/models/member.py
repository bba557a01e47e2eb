"""Member ORM — one row per stored version of a member.

Invariants:
    - (member_id, version) is unique: no two versions of a member share a number
    - Rows are written by an external process; this service only reads them
    - curr_ind is informational; the highest version is the current record

Design Decisions:
    - Integer surrogate key: member_id repeats across versions, so it cannot be the PK
    - The unique constraint's index on (member_id, version) serves ORDER BY version DESC LIMIT 1
"""

from datetime import date

from sqlalchemy import Date, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from member_api.core.domain_types import MEMBER_ID_MAX_LENGTH
from member_api.db.base import Base


# Columns copied into MemberRecord.payload
PAYLOAD_FIELDS: tuple[str, ...] = (
    "first_name", "last_name", "primary_number",
    "eff_start_date", "eff_end_date", "curr_ind",
)


class Member(Base):
    """A versioned member record."""
    __tablename__ = "members"
    __table_args__ = (
        UniqueConstraint("member_id", "version", name="uq_members_member_id_version"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    member_id: Mapped[str] = mapped_column(String(MEMBER_ID_MAX_LENGTH), nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False)
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    primary_number: Mapped[str | None] = mapped_column(String(32), nullable=True)
    eff_start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    eff_end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    curr_ind: Mapped[str | None] = mapped_column(String(1), nullable=True)
