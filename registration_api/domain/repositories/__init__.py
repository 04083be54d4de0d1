"""Repository interfaces - define contracts for data access."""

from registration_api.domain.repositories.base import IRepository
from registration_api.domain.repositories.unit_of_work import IUnitOfWork
from registration_api.domain.repositories.user_repository import IUserRepository

__all__ = ["IRepository", "IUserRepository", "IUnitOfWork"]
