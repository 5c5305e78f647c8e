"""
Wallet Application DTOs
=======================

Pydantic models for wallet API requests and responses.
"""

from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from src.wallet.domain import Transaction, PaymentMethod


# ========== Type Aliases for Literals ==========
RequestTypeStr = Literal["deposit", "withdrawal"]
ReviewStatusStr = Literal["approved", "rejected"]


# ========== Request DTOs ==========

class TransactionCreateRequest(BaseModel):
    """Deposit or withdrawal request submitted by a player."""
    type: RequestTypeStr = Field(..., description="deposit or withdrawal")
    amount: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2, description="Requested amount")
    payment_method_id: Optional[int] = Field(None, description="Payment channel used")
    receipt_url: Optional[str] = Field(None, max_length=500, description="Link to the uploaded receipt")
    description: Optional[str] = Field(None, max_length=500)


class TransactionReviewRequest(BaseModel):
    """Admin decision on a pending request."""
    status: ReviewStatusStr
    admin_notes: Optional[str] = Field(None, max_length=500)


class PaymentMethodCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100, description="e.g. KBZPay, Wave Money")
    account_name: str = Field(..., min_length=1, max_length=100)
    account_number: str = Field(..., min_length=1, max_length=100)
    is_active: bool = True


class PaymentMethodUpdateRequest(BaseModel):
    """Partial update; omitted fields keep their value."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    account_name: Optional[str] = Field(None, min_length=1, max_length=100)
    account_number: Optional[str] = Field(None, min_length=1, max_length=100)
    is_active: Optional[bool] = None

    @field_validator("name", "account_name", "account_number")
    @classmethod
    def not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("must not be blank")
        return v


# ========== Response DTOs ==========

class TransactionResponse(BaseModel):
    id: int
    user_id: int
    type: str
    amount: Decimal
    status: str
    description: Optional[str] = None
    payment_method_id: Optional[int] = None
    receipt_url: Optional[str] = None
    admin_notes: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            user_id=transaction.user_id,
            type=transaction.type,
            amount=transaction.amount,
            status=transaction.status,
            description=transaction.description,
            payment_method_id=transaction.payment_method_id,
            receipt_url=transaction.receipt_url,
            admin_notes=transaction.admin_notes,
            created_at=transaction.created_at
        )


class TransactionCreatedResponse(BaseModel):
    message: str
    transaction: TransactionResponse


class TransactionListResponse(BaseModel):
    transactions: List[TransactionResponse]


class PaymentMethodResponse(BaseModel):
    id: int
    name: str
    account_name: str
    account_number: str
    is_active: bool
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, method: PaymentMethod) -> "PaymentMethodResponse":
        return cls(
            id=method.id,
            name=method.name,
            account_name=method.account_name,
            account_number=method.account_number,
            is_active=method.is_active,
            created_at=method.created_at
        )


class PaymentMethodCreatedResponse(BaseModel):
    message: str
    payment_method: PaymentMethodResponse


class PaymentMethodListResponse(BaseModel):
    payment_methods: List[PaymentMethodResponse]
