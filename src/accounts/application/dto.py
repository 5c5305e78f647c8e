"""
Accounts Application DTOs
=========================

Pydantic models for account API requests and responses.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from src.accounts.domain import User


# ========== Request DTOs ==========

class RegisterRequest(BaseModel):
    """Request model for player registration."""
    username: str = Field(..., min_length=1, max_length=50, description="Unique login name")
    password: str = Field(..., min_length=6, description="At least 6 characters")
    confirm_password: str = Field(..., description="Must repeat password")
    phone: Optional[str] = Field(None, max_length=32, description="Unique phone number")
    used_ref_code: Optional[str] = Field(None, max_length=16, description="Referral code of the inviting player")

    @field_validator("username")
    @classmethod
    def strip_username(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Username is required")
        return v

    @field_validator("phone", "used_ref_code")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @model_validator(mode="after")
    def passwords_match(self) -> "RegisterRequest":
        if self.password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self


class LoginRequest(BaseModel):
    """Request model for login."""
    username: str = Field(..., min_length=1, description="Username is required")
    password: str = Field(..., min_length=6, description="Password must be at least 6 characters")


# ========== Response DTOs ==========

class UserResponse(BaseModel):
    """Public view of an account."""
    id: int
    username: str
    phone: Optional[str] = None
    balance: Decimal
    commission: Decimal
    referral_code: str
    is_admin: bool
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            phone=user.phone,
            balance=user.balance,
            commission=user.commission,
            referral_code=user.referral_code,
            is_admin=user.is_admin,
            created_at=user.created_at
        )


class AuthResponse(BaseModel):
    """Response model for register and login."""
    message: str
    token: str
    user: UserResponse


class MeResponse(BaseModel):
    user: UserResponse


class UserListResponse(BaseModel):
    users: List[UserResponse]
