from pydantic import BaseModel, EmailStr, Field, field_validator
from datetime import datetime


# Request Schemas
class RegisterRequest(BaseModel):
    """Register request schema."""

    name: str = Field(..., min_length=2, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=100)

    @field_validator('password')
    @classmethod
    def validate_password(cls, v: str) -> str:
        if len(v) < 8:
            raise ValueError('Password must be at least 8 characters long')
        if not any(c.isupper() for c in v):
            raise ValueError('Password must contain at least one uppercase letter')
        if not any(c.islower() for c in v):
            raise ValueError('Password must contain at least one lowercase letter')
        if not any(c.isdigit() for c in v):
            raise ValueError('Password must contain at least one digit')
        return v


class LoginRequest(BaseModel):
    """Login request schema."""

    email: EmailStr
    password: str


# Response Schemas
class UserResponse(BaseModel):
    """User response schema."""

    id: str
    email: EmailStr
    name: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    """Token plus user, returned by register and login."""

    access_token: str
    token_type: str = "bearer"
    user: UserResponse
