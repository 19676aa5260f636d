"""
Ad repository - ad creation and the filtered, sorted, paginated listing query.
"""

from sqlalchemy import Select, select
from sqlalchemy.exc import SQLAlchemyError

from marketplace.core.exceptions import StorageError
from marketplace.db.models.ad import Ad
from marketplace.db.models.user import User
from marketplace.db.repositories.base_repository import BaseRepository
from marketplace.schemas.ad import AdWithAuthor

SORT_COLUMNS = {
    "price": Ad.price,
    "created_at": Ad.created_at,
}


def _apply_order(stmt: Select, sort_by: str, sort_order: str) -> Select:
    """Order by a recognized (field, direction) pair, else by natural row order."""
    column = SORT_COLUMNS.get(sort_by)
    if column is None or sort_order not in ("asc", "desc"):
        return stmt.order_by(Ad.id)
    return stmt.order_by(column.asc() if sort_order == "asc" else column.desc())


class AdRepository(BaseRepository[Ad]):
    """Ad-specific queries. The listing joins the author login in the same query."""

    def __init__(self, session):
        super().__init__(session, Ad)

    async def get_ads(
        self,
        *,
        min_price: float = 0,
        max_price: float = 0,
        sort_by: str = "",
        sort_order: str = "",
        limit: int = 10,
        offset: int = 0,
    ) -> list[AdWithAuthor]:
        """Ads with author login. A price bound of 0 is not applied."""
        stmt = select(Ad, User.login).join(User, Ad.author_id == User.id)
        if min_price:
            stmt = stmt.where(Ad.price >= min_price)
        if max_price:
            stmt = stmt.where(Ad.price <= max_price)
        stmt = _apply_order(stmt, sort_by, sort_order).limit(limit).offset(offset)

        try:
            result = await self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StorageError("failed to list ads") from exc

        return [
            AdWithAuthor(
                id=ad.id,
                title=ad.title,
                description=ad.description,
                image_url=ad.image_url,
                price=ad.price,
                author_id=ad.author_id,
                author_login=login,
                created_at=ad.created_at,
            )
            for ad, login in result.all()
        ]
