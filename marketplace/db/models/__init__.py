from marketplace.db.models.ad import Ad
from marketplace.db.models.user import User

__all__ = ["User", "Ad"]
