"""CreateUser Use Case

Registers an account that can own subscriptions.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.user_repository import UserRepository
from src.domain.base import utc_now
from src.domain.user import User
from .dtos import CreateUserCommandDTO, UserResponseDTO

logger = logging.getLogger(__name__)


class CreateUser:
    """
    Use Case: Create a user

    Business Rules:
    1. Email is unique (case-insensitive, stored lower-cased)
    """

    def __init__(self, uow: UnitOfWork, user_repo: UserRepository):
        self.uow = uow
        self.user_repo = user_repo

    async def execute(self, command: CreateUserCommandDTO) -> Result[UserResponseDTO]:
        """
        Errors:
            EMAIL_ALREADY_EXISTS: another user has the same email
            PERSISTENCE_FAILURE: store failed while writing
        """
        email = command.email.strip().lower()

        if await self.user_repo.get_by_email(email):
            return Return.err(
                Error(
                    code="EMAIL_ALREADY_EXISTS",
                    message=f"A user with email {email} already exists",
                )
            )

        try:
            user = User(email=email, name=command.name.strip(), created_at=utc_now())
            created = await self.user_repo.create(user)
            await self.uow.commit()
        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create user {email}: {e}")
            return Return.err(
                Error(
                    code="PERSISTENCE_FAILURE",
                    message="Failed to create user",
                    reason=str(e),
                )
            )

        logger.info(f"Created user {created.id}")
        return Return.ok(self._to_response_dto(created))

    def _to_response_dto(self, user: User) -> UserResponseDTO:
        return UserResponseDTO(
            id=user.id,
            email=user.email,
            name=user.name,
            created_at=user.created_at,
        )
