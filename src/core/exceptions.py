"""
Core Exceptions
================

Custom exceptions for the application following clean architecture principles.

These exceptions define domain-specific errors that can be caught and handled
appropriately at the application boundaries. The API layer maps each class to
an HTTP status code (see shared.api.middleware).
"""

from decimal import Decimal
from typing import Optional


class ApplicationException(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class DomainException(ApplicationException):
    """Base exception for domain logic violations."""


class RepositoryException(ApplicationException):
    """Base exception for repository/data access errors."""


class ValidationException(ApplicationException):
    """Exception for validation errors."""


class ResourceNotFoundException(ApplicationException):
    """Exception when a requested resource is not found."""

    def __init__(
        self,
        resource_type: str,
        resource_id: Optional[str] = None,
        details: Optional[dict] = None
    ):
        self.resource_type = resource_type
        self.resource_id = resource_id
        message = f"{resource_type}"
        if resource_id:
            message += f" with id '{resource_id}'"
        message += " not found"
        super().__init__(message, details)


class ConfigurationException(ApplicationException):
    """Exception for configuration errors."""


class AuthenticationException(ApplicationException):
    """Missing, expired or invalid credentials."""


class AuthorizationException(ApplicationException):
    """Authenticated user lacks the required role."""


class ConflictException(DomainException):
    """Operation conflicts with the current state of a resource."""


class InsufficientBalanceException(DomainException):
    """Exception raised when a wallet cannot cover a debit."""

    def __init__(
        self,
        user_id: int,
        requested: Decimal,
        available: Decimal,
        details: Optional[dict] = None
    ):
        self.user_id = user_id
        self.requested = requested
        self.available = available
        super().__init__(
            "Insufficient balance",
            details or {
                "user_id": user_id,
                "requested": str(requested),
                "available": str(available),
            }
        )
