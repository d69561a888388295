"""Shared enums for models."""

from enum import Enum


class Role(str, Enum):
    """Platform-wide user role."""

    ADMIN = "admin"
    USER = "user"
    MANAGER = "manager"
