"""Request schemas for Subscription API

Pydantic models for validating incoming HTTP requests.
"""

from datetime import date
from decimal import Decimal
from pydantic import BaseModel, Field, field_validator

from src.domain.billing_cycle import BillingCycle


class SubscriptionRequestSchema(BaseModel):
    """
    Request schema for creating or replacing a subscription

    Used for POST /subscriptions and PUT /subscriptions/{id}.
    next_billing_date is not accepted; it is always derived server-side.
    """

    user_id: int = Field(
        ...,
        gt=0,
        description="Owning user ID (required, positive)"
    )

    service_name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Service name (required, non-blank, max 100 characters)"
    )

    price: Decimal = Field(
        ...,
        gt=0,
        max_digits=10,
        decimal_places=2,
        description="Price per cycle (> 0, up to 8 integer and 2 fractional digits)"
    )

    billing_cycle: BillingCycle = Field(
        ...,
        description="Billing cycle (MONTHLY, QUARTERLY, YEARLY)"
    )

    billing_date: date = Field(
        ...,
        description="Reference billing date (YYYY-MM-DD)"
    )

    @field_validator('service_name')
    @classmethod
    def validate_service_name(cls, v):
        """Reject blank names and trim surrounding whitespace"""
        v = v.strip()
        if not v:
            raise ValueError("Service name must not be blank")
        return v

    class Config:
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "user_id": 1,
                "service_name": "Netflix",
                "price": "9500.00",
                "billing_cycle": "MONTHLY",
                "billing_date": "2024-12-15"
            }
        }
