"""Database models for the organization API."""

from .base import Base, UTCDateTime
from .organizations import OPTIONAL_FIELDS, Organization

__all__ = [
    "Base",
    "UTCDateTime",
    "OPTIONAL_FIELDS",
    "Organization",
]
