"""
Accounts Application Layer
==========================

Contains:
- Services: Registration, login, bootstrap admin
- DTOs: Data transfer objects for API serialization
"""

from src.accounts.application.dto import (
    RegisterRequest,
    LoginRequest,
    UserResponse,
    AuthResponse,
    MeResponse,
    UserListResponse,
)
from src.accounts.application.services import (
    AccountService,
    IUserRepository,
)

__all__ = [
    # DTOs
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "AuthResponse",
    "MeResponse",
    "UserListResponse",
    # Services
    "AccountService",
    # Repository Interfaces
    "IUserRepository",
]
