"""Repository implementations using SQLAlchemy."""

from registration_api.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from registration_api.infrastructure.repositories.user_repository_impl import UserRepository

__all__ = ["UserRepository", "UnitOfWork"]
