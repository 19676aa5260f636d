"""
Ad endpoints - create (authenticated) and list (anonymous or personalised).
"""

from fastapi import APIRouter, Request, status

from marketplace.core.dependencies import CurrentCaller, OptionalCaller
from marketplace.db.session import DbSession
from marketplace.db.repositories.ad_repository import AdRepository
from marketplace.schemas.ad import AdCreate, AdListItem, AdResponse
from marketplace.services.ad_service import AdService
from marketplace.services.list_query import parse_list_query

router = APIRouter()


def _get_ad_service(session: DbSession) -> AdService:
    """Factory for service with repository injection."""
    return AdService(AdRepository(session))


@router.post("", response_model=AdResponse, status_code=status.HTTP_201_CREATED)
async def create_ad(session: DbSession, data: AdCreate, caller: CurrentCaller):
    """Create an ad owned by the authenticated caller."""
    return await _get_ad_service(session).create(data, author_id=caller.user_id)


@router.get("", response_model=list[AdListItem])
async def list_ads(request: Request, session: DbSession, caller: OptionalCaller):
    """
    GET /ads?page=1&page_size=10&sort_by=price&sort_order=asc&min_price=0&max_price=0

    A valid token marks the caller's own ads with is_owner; a bad one is treated as anonymous.
    """
    query = parse_list_query(request.query_params)
    return await _get_ad_service(session).list_ads(query, caller_id=caller.user_id)
