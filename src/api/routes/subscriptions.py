"""Subscription API Routes

FastAPI routes for subscription management, upcoming billing and monthly
expense queries.
"""

from typing import List
from fastapi import APIRouter, Depends, Query, Response, status
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.api.schemas.subscription_request import SubscriptionRequestSchema
from src.app.use_cases.subscriptions.dtos import (
    SubscriptionCommandDTO,
    SubscriptionResponseDTO,
    MonthlyExpenseResponseDTO,
)
from src.app.use_cases.subscriptions import (
    CreateSubscription,
    UpdateSubscription,
    DeleteSubscription,
    GetSubscription,
    ListSubscriptions,
    ListUpcomingSubscriptions,
    GetMonthlyExpense,
)
from src.app.services.billing_calculator import BillingCalculator
from src.app.services.clock import Clock
from src.adapter.repositories.subscription_repository import SqlAlchemySubscriptionRepository
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session, get_clock, get_billing_calculator
from src.api.error import ClientError

router = APIRouter(prefix="/subscriptions", tags=["Subscriptions"])

ERROR_STATUS = {
    "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
    "OWNER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "SUBSCRIPTION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "PERSISTENCE_FAILURE": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

NOT_FOUND_RESPONSE = {
    404: {
        "description": "Subscription or owner not found",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "SUBSCRIPTION_NOT_FOUND",
                        "message": "Subscription 123 not found"
                    }
                }
            }
        }
    }
}

VALIDATION_RESPONSE = {
    400: {
        "description": "Validation error",
        "content": {
            "application/json": {
                "example": {
                    "error": {
                        "code": "VALIDATION_ERROR",
                        "message": "Invalid request parameters",
                        "fields": [{"field": "price", "message": "Input should be greater than 0"}]
                    }
                }
            }
        }
    }
}


def _raise_for_error(result):
    if result.is_err():
        raise ClientError(
            result.error,
            status_code=ERROR_STATUS.get(result.error.code, status.HTTP_400_BAD_REQUEST),
        )


def _to_command(request: SubscriptionRequestSchema) -> SubscriptionCommandDTO:
    return SubscriptionCommandDTO(
        user_id=request.user_id,
        service_name=request.service_name,
        price=request.price,
        billing_cycle=request.billing_cycle,
        billing_date=request.billing_date,
    )


@router.post(
    "",
    response_model=SubscriptionResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={**VALIDATION_RESPONSE, **NOT_FOUND_RESPONSE},
)
async def create_subscription(
    request: SubscriptionRequestSchema,
    session: AsyncSession = Depends(get_session),
    calculator: BillingCalculator = Depends(get_billing_calculator),
):
    """
    Register a subscription for a user.

    The next billing date is computed from `billing_date` and
    `billing_cycle`; it cannot be supplied by the client.

    **Returns:**
    - 201: Subscription created
    - 400: Invalid request parameters
    - 404: Owner not found
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = CreateSubscription(
        uow,
        SqlAlchemySubscriptionRepository(session),
        SqlAlchemyUserRepository(session),
        calculator,
    )
    result = await use_case.execute(_to_command(request))
    _raise_for_error(result)
    return result.value


@router.get(
    "",
    response_model=List[SubscriptionResponseDTO],
    status_code=status.HTTP_200_OK,
    responses=VALIDATION_RESPONSE,
)
async def list_subscriptions(
    user_id: int = Query(..., gt=0, description="Owning user ID"),
    session: AsyncSession = Depends(get_session),
):
    """List every subscription of a user, ordered by ID."""
    use_case = ListSubscriptions(SqlAlchemySubscriptionRepository(session))
    result = await use_case.execute(user_id)
    _raise_for_error(result)
    return result.value


@router.get(
    "/upcoming",
    response_model=List[SubscriptionResponseDTO],
    status_code=status.HTTP_200_OK,
    responses=VALIDATION_RESPONSE,
)
async def list_upcoming_subscriptions(
    user_id: int = Query(..., gt=0, description="Owning user ID"),
    horizon_days: int = Query(
        ApplicationConfig.UPCOMING_HORIZON_DAYS,
        ge=0,
        le=366,
        description="Days after today to include (inclusive)",
    ),
    session: AsyncSession = Depends(get_session),
    clock: Clock = Depends(get_clock),
):
    """
    List a user's subscriptions billed between today and today + horizon_days.

    Both bounds are inclusive. "Today" is evaluated in the configured
    billing time zone.
    """
    use_case = ListUpcomingSubscriptions(SqlAlchemySubscriptionRepository(session), clock)
    result = await use_case.execute(user_id, horizon_days)
    _raise_for_error(result)
    return result.value


@router.get(
    "/monthly-expense",
    response_model=MonthlyExpenseResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=VALIDATION_RESPONSE,
)
async def get_monthly_expense(
    user_id: int = Query(..., gt=0, description="Owning user ID"),
    session: AsyncSession = Depends(get_session),
    calculator: BillingCalculator = Depends(get_billing_calculator),
):
    """
    Total monthly-equivalent expense of a user's subscriptions.

    QUARTERLY prices are divided by 3 and YEARLY by 12, each rounded
    half-up to cents before summing.
    """
    use_case = GetMonthlyExpense(SqlAlchemySubscriptionRepository(session), calculator)
    result = await use_case.execute(user_id)
    _raise_for_error(result)
    return result.value


@router.get(
    "/{subscription_id}",
    response_model=SubscriptionResponseDTO,
    status_code=status.HTTP_200_OK,
    responses=NOT_FOUND_RESPONSE,
)
async def get_subscription(
    subscription_id: int,
    session: AsyncSession = Depends(get_session),
):
    """Get a single subscription."""
    use_case = GetSubscription(SqlAlchemySubscriptionRepository(session))
    result = await use_case.execute(subscription_id)
    _raise_for_error(result)
    return result.value


@router.put(
    "/{subscription_id}",
    response_model=SubscriptionResponseDTO,
    status_code=status.HTTP_200_OK,
    responses={**VALIDATION_RESPONSE, **NOT_FOUND_RESPONSE},
)
async def update_subscription(
    subscription_id: int,
    request: SubscriptionRequestSchema,
    session: AsyncSession = Depends(get_session),
    calculator: BillingCalculator = Depends(get_billing_calculator),
):
    """
    Replace the editable fields of a subscription.

    The next billing date is always recomputed from the new values.
    """
    uow = SqlAlchemyUnitOfWork(session)
    use_case = UpdateSubscription(
        uow,
        SqlAlchemySubscriptionRepository(session),
        SqlAlchemyUserRepository(session),
        calculator,
    )
    result = await use_case.execute(subscription_id, _to_command(request))
    _raise_for_error(result)
    return result.value


@router.delete(
    "/{subscription_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND_RESPONSE,
)
async def delete_subscription(
    subscription_id: int,
    session: AsyncSession = Depends(get_session),
):
    """Permanently delete a subscription."""
    uow = SqlAlchemyUnitOfWork(session)
    use_case = DeleteSubscription(uow, SqlAlchemySubscriptionRepository(session))
    result = await use_case.execute(subscription_id)
    _raise_for_error(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
