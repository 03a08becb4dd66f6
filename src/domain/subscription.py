"""Subscription Domain Entity

A recurring payment registered by a user (streaming, gym, ...).
"""

from datetime import datetime, date
from decimal import Decimal
from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import BigInteger, Integer, ForeignKey, Numeric, String, Date, DateTime, CheckConstraint
from src.domain.base import BaseModel, utc_now
from src.domain.billing_cycle import BillingCycle


class Subscription(BaseModel, table=True):
    """
    Subscription - Recurring payment tracked for a user

    Domain Rules:
    - price > 0 with at most 2 fractional digits
    - next_billing_date is always billing_date advanced by one billing_cycle;
      it is derived by the use cases and never accepted from callers
    - Belongs to exactly one user (user_id)
    """

    __tablename__ = "subscriptions"
    __table_args__ = (
        CheckConstraint('price > 0', name='price_positive'),
        Index('ix_subscriptions_user_id', 'user_id'),
        Index('ix_subscriptions_next_billing_date', 'next_billing_date'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(
            BigInteger().with_variant(Integer, "sqlite"),
            primary_key=True,
            autoincrement=True,
        ),
        description="Unique subscription identifier (auto-increment)"
    )

    user_id: int = Field(
        sa_column=Column(BigInteger, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        description="Owning user ID"
    )

    service_name: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Name of the subscribed service"
    )

    price: Decimal = Field(
        sa_column=Column(Numeric(10, 2), nullable=False),
        description="Price per billing cycle (precision: 10,2)"
    )

    billing_cycle: BillingCycle = Field(
        description="Billing cycle (MONTHLY, QUARTERLY, YEARLY)"
    )

    billing_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Reference (most recent) billing date"
    )

    next_billing_date: date = Field(
        sa_column=Column(Date, nullable=False),
        description="Derived next billing date"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Subscription creation timestamp"
    )

    updated_at: datetime = Field(
        default_factory=utc_now,
        sa_column=Column(DateTime(timezone=True), nullable=False),
        description="Last update timestamp"
    )

    class Config:
        """SQLModel configuration"""
        json_schema_extra = {
            "example": {
                "id": 1,
                "user_id": 1,
                "service_name": "Netflix",
                "price": "9500.00",
                "billing_cycle": "MONTHLY",
                "billing_date": "2024-12-15",
                "next_billing_date": "2025-01-15",
                "created_at": "2024-12-15T00:00:00Z",
                "updated_at": "2024-12-15T00:00:00Z"
            }
        }
