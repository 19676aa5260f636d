# Repository pattern: the store collaborator behind the services

from marketplace.db.repositories.ad_repository import AdRepository
from marketplace.db.repositories.user_repository import UserRepository

__all__ = ["UserRepository", "AdRepository"]
