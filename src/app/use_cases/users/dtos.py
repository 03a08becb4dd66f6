"""Data Transfer Objects for User Use Cases"""

from datetime import datetime
from pydantic import BaseModel, Field


class CreateUserCommandDTO(BaseModel):
    """Command DTO for registering a subscription owner"""

    email: str = Field(
        ...,
        min_length=3,
        max_length=255,
        description="User email address (unique)"
    )

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Display name"
    )


class UserResponseDTO(BaseModel):
    """Response DTO for a user"""

    id: int = Field(
        ...,
        description="User ID"
    )

    email: str = Field(
        ...,
        description="User email address"
    )

    name: str = Field(
        ...,
        description="Display name"
    )

    created_at: datetime = Field(
        ...,
        description="User creation timestamp"
    )

    class Config:
        json_schema_extra = {
            "example": {
                "id": 1,
                "email": "jane@example.com",
                "name": "Jane",
                "created_at": "2024-01-01T00:00:00Z"
            }
        }
