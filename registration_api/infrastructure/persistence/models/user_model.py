"""User ORM model - infrastructure layer SQLAlchemy mapping."""

from datetime import datetime

from sqlalchemy import String, func
from sqlalchemy.orm import Mapped, mapped_column

from registration_api.domain.entities.user import User
from registration_api.infrastructure.persistence.database import Base


class UserModel(Base):
    """
    SQLAlchemy ORM model for users table.

    The unique index on ``username`` is what enforces global username
    uniqueness; the application never checks it by itself.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    username: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    fullname: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    email: Mapped[str] = mapped_column(String(255), nullable=False)

    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        insert_default=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        # password_hash intentionally left out
        return f"UserModel(id={self.id!r}, username={self.username!r})"

    def to_entity(self) -> User:
        """Convert ORM model to domain entity."""
        return User(
            id=self.id,
            username=self.username,
            password_hash=self.password_hash,
            fullname=self.fullname,
            email=self.email,
            created_at=self.created_at,
        )

    @staticmethod
    def from_entity(user: User) -> "UserModel":
        """
        Create ORM model from domain entity.

        Args:
            user: Domain entity

        Returns:
            ORM model ready for persistence
        """
        model = UserModel(
            username=user.username,
            password_hash=user.password_hash,
            fullname=user.fullname,
            email=user.email,
        )

        if user.id is not None:
            model.id = user.id
        if user.created_at is not None:
            model.created_at = user.created_at

        return model
