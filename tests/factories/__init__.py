"""Test factories for the organization API models."""

from .base import AsyncSQLAlchemyModelFactory
from .organizations import OrganizationFactory

__all__ = [
    "AsyncSQLAlchemyModelFactory",
    "OrganizationFactory",
]
