"""
Ad service - ad creation and the listing engine.
Keeps controllers thin: pagination math and the ownership flag live here.
"""

import logging
import re

from marketplace.core.exceptions import ValidationError
from marketplace.db.models.ad import Ad
from marketplace.db.repositories.ad_repository import AdRepository
from marketplace.schemas.ad import AdCreate, AdListItem, AdListQuery, AdResponse

logger = logging.getLogger(__name__)

INVALID_TITLE_CHARS = re.compile(r"[^a-zA-Z0-9\s]")


def page_window(page: int, page_size: int) -> tuple[int, int]:
    """(offset, limit) for a 1-based page."""
    return (page - 1) * page_size, page_size


class AdService:
    """Handles ad use cases against the ad repository."""

    def __init__(self, ad_repo: AdRepository):
        self.ad_repo = ad_repo

    async def create(self, data: AdCreate, author_id: int) -> AdResponse:
        """Store a new ad owned by author_id."""
        if INVALID_TITLE_CHARS.search(data.title):
            raise ValidationError("invalid title characters")
        if data.price <= 0:
            raise ValidationError("price must be positive")

        ad = Ad(
            title=data.title,
            description=data.description,
            image_url=data.image_url,
            price=data.price,
            author_id=author_id,
        )
        ad = await self.ad_repo.add(ad)
        logger.info("Ad id=%s created by user id=%s", ad.id, author_id)
        return AdResponse.model_validate(ad)

    async def list_ads(self, query: AdListQuery, caller_id: int) -> list[AdListItem]:
        """One page of ads, each flagged with whether caller_id wrote it."""
        offset, limit = page_window(query.page, query.page_size)
        rows = await self.ad_repo.get_ads(
            min_price=query.min_price,
            max_price=query.max_price,
            sort_by=query.sort_by,
            sort_order=query.sort_order,
            limit=limit,
            offset=offset,
        )
        return [
            AdListItem(
                id=row.id,
                title=row.title,
                description=row.description,
                image_url=row.image_url,
                price=row.price,
                author_login=row.author_login,
                is_owner=row.author_id == caller_id,
            )
            for row in rows
        ]
