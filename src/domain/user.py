"""User Domain Entity

Owner of subscriptions. Used purely as a scoping key by the billing logic.
"""

from datetime import datetime
from typing import Optional
from sqlmodel import Field, Column
from sqlalchemy import BigInteger, Integer, String, DateTime
from src.domain.base import BaseModel, utc_now


class User(BaseModel, table=True):
    """
    User - Account that owns subscriptions

    Domain Rules:
    - email is unique
    - No credentials are stored (authentication is handled elsewhere)
    """

    __tablename__ = "users"

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(
            BigInteger().with_variant(Integer, "sqlite"),
            primary_key=True,
            autoincrement=True,
        ),
        description="Unique user identifier (auto-increment)"
    )

    email: str = Field(
        sa_column=Column(String(255), nullable=False, unique=True),
        description="User email address (unique)"
    )

    name: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Display name"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="User creation timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "email": "jane@example.com",
                "name": "Jane",
                "created_at": "2024-01-01T00:00:00Z"
            }
        }
