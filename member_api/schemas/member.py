"""Member Schemas — Pydantic response bodies for the members API.

Invariants:
    - JSON keys are camelCase (memberId, firstName, effStartDate, ...)
    - Dates serialize as ISO-8601 strings
    - Error bodies are always {"message": str}
"""

from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from member_api.core.domain_types import MemberRecord


class MemberResponse(BaseModel):
    """Current member record, public-facing representation."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    member_id: str
    version: int
    first_name: str | None = None
    last_name: str | None = None
    primary_number: str | None = None
    eff_start_date: date | None = None
    eff_end_date: date | None = None
    curr_ind: str | None = None

    @classmethod
    def from_record(cls, record: MemberRecord) -> "MemberResponse":
        known = set(cls.model_fields) - {"member_id", "version"}
        return cls(
            member_id=record.member_id,
            version=record.version,
            **{k: v for k, v in record.payload.items() if k in known},
        )


class MessageResponse(BaseModel):
    """Error/status body."""
    message: str
