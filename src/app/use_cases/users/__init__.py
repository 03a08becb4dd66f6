"""User use cases"""
from .create_user import CreateUser
from .get_user import GetUser
from .dtos import CreateUserCommandDTO, UserResponseDTO

__all__ = [
    "CreateUser",
    "GetUser",
    "CreateUserCommandDTO",
    "UserResponseDTO",
]
