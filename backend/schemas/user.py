"""Request bodies and field projections for user accounts.

None of the projections carry ``hashed_password``; the only place the hash is
visible is the ORM instance used while verifying a login.
"""

from enum import Enum

from pydantic import BaseModel, field_validator


class UserView(str, Enum):
    PUBLIC = 'public'
    OWNER = 'owner'


class PublicUser(BaseModel):
    username: str

    class Config:
        from_attributes = True


class SafeUser(BaseModel):
    id: int
    username: str
    email: str

    class Config:
        from_attributes = True


class SignupRequest(BaseModel):
    username: str
    email: str
    password: str


class LoginRequest(BaseModel):
    credential: str
    password: str

    @field_validator('credential')
    @classmethod
    def validate_credential(cls, value: str) -> str:
        if not value.strip():
            raise ValueError('Email or username is required.')
        return value

    @field_validator('password')
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value:
            raise ValueError('Password is required.')
        return value


class SessionResponse(BaseModel):
    user: SafeUser
    access_token: str
    token_type: str = 'bearer'


class CurrentSessionResponse(BaseModel):
    user: SafeUser
