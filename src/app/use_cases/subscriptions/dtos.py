"""Data Transfer Objects for Subscription Use Cases

Pydantic models for command inputs and response outputs.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import List
from pydantic import BaseModel, Field

from src.domain.billing_cycle import BillingCycle
from src.domain.subscription import Subscription


class SubscriptionCommandDTO(BaseModel):
    """
    Command DTO for creating or replacing a subscription

    Used as input to CreateSubscription and UpdateSubscription.
    next_billing_date is intentionally absent: it is always derived.
    """

    user_id: int = Field(
        ...,
        gt=0,
        description="Owning user ID"
    )

    service_name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Name of the subscribed service"
    )

    price: Decimal = Field(
        ...,
        gt=0,
        max_digits=10,
        decimal_places=2,
        description="Price per billing cycle (must be > 0, 2 decimal places max)"
    )

    billing_cycle: BillingCycle = Field(
        ...,
        description="Billing cycle (MONTHLY, QUARTERLY, YEARLY)"
    )

    billing_date: date = Field(
        ...,
        description="Reference billing date"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": 1,
                "service_name": "Netflix",
                "price": "9500.00",
                "billing_cycle": "MONTHLY",
                "billing_date": "2024-12-15"
            }
        }


class SubscriptionResponseDTO(BaseModel):
    """
    Response DTO for a single subscription

    Returned by create, update, get and list operations.
    """

    id: int = Field(
        ...,
        description="Subscription ID"
    )

    user_id: int = Field(
        ...,
        description="Owning user ID"
    )

    service_name: str = Field(
        ...,
        description="Name of the subscribed service"
    )

    price: Decimal = Field(
        ...,
        description="Price per billing cycle"
    )

    billing_cycle: BillingCycle = Field(
        ...,
        description="Billing cycle"
    )

    billing_date: date = Field(
        ...,
        description="Reference billing date"
    )

    next_billing_date: date = Field(
        ...,
        description="Derived next billing date"
    )

    @classmethod
    def from_entity(cls, subscription: Subscription) -> "SubscriptionResponseDTO":
        """Build the response DTO from a persisted Subscription"""
        return cls(
            id=subscription.id,
            user_id=subscription.user_id,
            service_name=subscription.service_name,
            price=subscription.price,
            billing_cycle=subscription.billing_cycle,
            billing_date=subscription.billing_date,
            next_billing_date=subscription.next_billing_date,
        )

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "user_id": 1,
                "service_name": "Netflix",
                "price": "9500.00",
                "billing_cycle": "MONTHLY",
                "billing_date": "2024-12-15",
                "next_billing_date": "2025-01-15"
            }
        }


class MonthlyExpenseResponseDTO(BaseModel):
    """
    Response DTO for the monthly expense of a user

    Returned by GetMonthlyExpense use case.
    """

    user_id: int = Field(
        ...,
        description="Owning user ID"
    )

    total_monthly_expense: Decimal = Field(
        ...,
        description="Sum of monthly-equivalent amounts (2 decimal places)"
    )

    subscription_count: int = Field(
        ...,
        ge=0,
        description="Number of subscriptions included in the total"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "user_id": 1,
                "total_monthly_expense": "39500.00",
                "subscription_count": 3
            }
        }


class UpcomingBillingItemDTO(BaseModel):
    """Single subscription due within the scan horizon"""

    subscription_id: int
    user_id: int
    service_name: str
    price: Decimal
    next_billing_date: date
    days_until: int = Field(
        ...,
        ge=0,
        description="Whole days between the scan date and next_billing_date"
    )


class UpcomingBillingReportDTO(BaseModel):
    """
    Result DTO for the upcoming billing scan

    Returned by ScanUpcomingBilling use case. An empty item list is a valid
    outcome, not a failure.
    """

    scan_date: date = Field(
        ...,
        description="Today in the billing time zone"
    )

    horizon_end: date = Field(
        ...,
        description="Last date of the scan window (inclusive)"
    )

    total_found: int = Field(
        ...,
        ge=0,
        description="Number of subscriptions due in the window"
    )

    items: List[UpcomingBillingItemDTO] = Field(
        default_factory=list,
        description="Subscriptions due in the window"
    )

    generated_at: datetime = Field(
        ...,
        description="When the report was produced"
    )
