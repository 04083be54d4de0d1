"""Data Transfer Objects for application layer."""

from registration_api.application.dtos.user_dto import UserDTO

__all__ = ["UserDTO"]
