"""User API Routes"""

from fastapi import APIRouter, Depends, status
from sqlmodel.ext.asyncio.session import AsyncSession

from src.api.schemas.user_request import UserRequestSchema
from src.app.use_cases.users import CreateUser, GetUser, CreateUserCommandDTO, UserResponseDTO
from src.adapter.repositories.user_repository import SqlAlchemyUserRepository
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.depends import get_session
from src.api.error import ClientError

router = APIRouter(prefix="/users", tags=["Users"])


@router.post(
    "",
    response_model=UserResponseDTO,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {
            "description": "Email already registered",
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": "EMAIL_ALREADY_EXISTS",
                            "message": "A user with email jane@example.com already exists"
                        }
                    }
                }
            }
        }
    }
)
async def create_user(
    request: UserRequestSchema,
    session: AsyncSession = Depends(get_session),
):
    """Register a user that can own subscriptions."""
    uow = SqlAlchemyUnitOfWork(session)
    use_case = CreateUser(uow, SqlAlchemyUserRepository(session))
    result = await use_case.execute(
        CreateUserCommandDTO(email=request.email, name=request.name)
    )

    if result.is_err():
        if result.error.code == "EMAIL_ALREADY_EXISTS":
            raise ClientError(result.error, status_code=status.HTTP_409_CONFLICT)
        if result.error.code == "PERSISTENCE_FAILURE":
            raise ClientError(result.error, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
        raise ClientError(result.error)

    return result.value


@router.get(
    "/{user_id}",
    response_model=UserResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_user(
    user_id: int,
    session: AsyncSession = Depends(get_session),
):
    """Get a user by ID."""
    use_case = GetUser(SqlAlchemyUserRepository(session))
    result = await use_case.execute(user_id)

    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_404_NOT_FOUND)

    return result.value
