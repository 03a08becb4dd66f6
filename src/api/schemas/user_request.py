"""Request schemas for User API"""

from pydantic import BaseModel, Field, field_validator


class UserRequestSchema(BaseModel):
    """Request schema for POST /users"""

    email: str = Field(
        ...,
        min_length=3,
        max_length=255,
        description="Email address (required, unique)"
    )

    name: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Display name (required, max 100 characters)"
    )

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        v = v.strip()
        local, sep, domain = v.partition("@")
        if not sep or not local or "." not in domain:
            raise ValueError("Invalid email address")
        return v

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Name must not be blank")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "email": "jane@example.com",
                "name": "Jane"
            }
        }
