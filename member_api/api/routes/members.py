"""Members Routes — GET the current record for a member identifier.

Invariants:
    - The identifier is checked before a repository is built; blank ids never reach storage
    - Found → 200 MemberResponse, Absent → MemberNotFoundError (404),
      StorageFailure → its StorageError re-raised for the global handler (500)
    - Route holds no business logic: outcome mapping only
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from member_api.config import Settings, get_settings
from member_api.core.domain_types import Absent, Found, MemberId
from member_api.core.enforce_member_id import check_member_id
from member_api.core.errors import InvalidMemberIdError, MemberNotFoundError
from member_api.infrastructure.database import get_db
from member_api.infrastructure.member_repository import SqlMemberRepository
from member_api.schemas.member import MemberResponse, MessageResponse
from member_api.services.member_lookup import MemberLookupService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/members", tags=["members"])

_ERROR_RESPONSES = {
    400: {"model": MessageResponse},
    404: {"model": MessageResponse},
    500: {"model": MessageResponse},
}


def valid_member_id(
    member_id: str, settings: Settings = Depends(get_settings),
) -> MemberId:
    return check_member_id(member_id, settings.member_id_max_length)


def get_member_lookup_service(
    db: AsyncSession = Depends(get_db),
) -> MemberLookupService:
    return MemberLookupService(SqlMemberRepository(db))


@router.get("/", include_in_schema=False, responses=_ERROR_RESPONSES)
async def get_member_without_id():
    raise InvalidMemberIdError("Member ID cannot be empty")


@router.get(
    "/{member_id}", response_model=MemberResponse, responses=_ERROR_RESPONSES,
)
async def get_latest_member(
    checked_id: MemberId = Depends(valid_member_id),
    service: MemberLookupService = Depends(get_member_lookup_service),
):
    """Get the current (highest-version) record for a member."""
    logger.info("Fetching member", extra={"member_id": checked_id})
    outcome = await service.get_latest(checked_id)
    if isinstance(outcome, Found):
        return MemberResponse.from_record(outcome.record)
    if isinstance(outcome, Absent):
        raise MemberNotFoundError(outcome.member_id)
    raise outcome.error
