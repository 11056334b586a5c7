# File: getlocalbuddy/schemas/user.py

from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python (either accepted on input)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class RegisterRequest(CamelModel):
    # Optional here so a missing field becomes our 400, not a schema error
    email: Optional[EmailStr] = None
    password: Optional[str] = None
    role: Optional[str] = None

    @field_validator("email", "password", mode="before")
    @classmethod
    def blank_as_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class RegisterResponse(CamelModel):
    message: str
    user_id: int


class LoginRequest(CamelModel):
    email: Optional[str] = None
    password: Optional[str] = None


class UserUpdate(CamelModel):
    name: Optional[str] = None
    bio: Optional[str] = None
    city: Optional[str] = None
    role: Optional[str] = None
    avatar_url: Optional[str] = None


class UserRead(CamelModel):
    """Public profile. Deliberately has no password field."""

    id: int
    email: str
    role: Optional[str] = None
    name: Optional[str] = None
    bio: Optional[str] = None
    city: Optional[str] = None
    avatar_url: Optional[str] = None
