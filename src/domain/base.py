"""Shared base for domain entities"""

from datetime import datetime, timezone
from sqlmodel import SQLModel


def utc_now() -> datetime:
    """Current time as an aware UTC datetime"""
    return datetime.now(timezone.utc)


class BaseModel(SQLModel):
    """Base class for all SQLModel domain entities"""
    pass
