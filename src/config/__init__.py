"""
Configuration Module
====================

Application settings and configuration management using Pydantic.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import List, Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses Pydantic for validation and type safety.
    """

    # ========== Application ==========
    app_name: str = Field(default="lottery-service", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: str = Field(default="development", description="Environment name")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Root log level")

    # ========== Server ==========
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port", ge=1, le=65535)

    # ========== Database ==========
    database_url: str = Field(
        default="postgresql+asyncpg://localhost:5432/lottery",
        description="Database connection URL (async driver)"
    )
    db_pool_size: int = Field(default=5, description="Database connection pool size", ge=1)
    db_max_overflow: int = Field(default=10, description="Max overflow connections", ge=0)

    # ========== Authentication ==========
    jwt_secret_key: str = Field(
        default="change-me",
        description="Secret used to sign access tokens"
    )
    jwt_algorithm: str = Field(default="HS256", description="Access token signing algorithm")
    access_token_expire_minutes: int = Field(
        default=60 * 24 * 7,
        description="Access token lifetime in minutes",
        ge=1
    )
    bcrypt_rounds: int = Field(
        default=12,
        description="bcrypt cost factor for password hashing",
        ge=4,
        le=16
    )

    # ========== Bootstrap Admin ==========
    bootstrap_admin_username: Optional[str] = Field(
        default=None,
        description="Admin account created on startup when missing"
    )
    bootstrap_admin_password: Optional[str] = Field(
        default=None,
        description="Password for the bootstrap admin account"
    )

    # ========== Draws ==========
    draw_timezone: str = Field(
        default="Asia/Yangon",
        description="Timezone that defines the calendar day of a draw"
    )
    game_config_path: Path = Field(
        default=Path("game_config.yaml"),
        description="Path to game rules YAML file (odds, limits, bonuses)"
    )

    # ========== CORS ==========
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"],
        description="Allowed CORS origins"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is one of allowed values."""
        allowed = {"development", "test", "staging", "production"}
        if v not in allowed:
            raise ValueError(f"environment must be one of {allowed}")
        return v

    @field_validator("draw_timezone")
    @classmethod
    def validate_draw_timezone(cls, v: str) -> str:
        """Reject timezone names the system tz database does not know."""
        from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"unknown timezone: {v}")
        return v


@lru_cache()
def get_settings() -> Settings:
    """Returns cached Settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()


# ========== Constants ==========

class BetType(str):
    """Lottery games a bet can be placed on."""
    TWO_D = "2D"            # two-digit draw, 00-99
    THREE_D = "3D"          # three-digit draw, 000-999


class BetStatus(str):
    """Bet lifecycle statuses."""
    PENDING = "pending"
    WON = "won"
    LOST = "lost"


class TransactionType(str):
    """Ledger entry types."""
    DEPOSIT = "deposit"
    WITHDRAWAL = "withdrawal"
    BET = "bet"
    PAYOUT = "payout"
    COMMISSION = "commission"


class TransactionStatus(str):
    """Ledger entry statuses."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    COMPLETED = "completed"


class AuditAction(str):
    """Admin actions recorded in the audit log."""
    RESULT_CREATED = "RESULT_CREATED"
    TRANSACTION_UPDATE = "TRANSACTION_UPDATE"
    PAYMENT_METHOD_CREATED = "PAYMENT_METHOD_CREATED"
    PAYMENT_METHOD_UPDATED = "PAYMENT_METHOD_UPDATED"
    PAYMENT_METHOD_DELETED = "PAYMENT_METHOD_DELETED"


# ========== Lists for validation ==========

VALID_BET_TYPES = [BetType.TWO_D, BetType.THREE_D]
VALID_TRANSACTION_TYPES = [
    TransactionType.DEPOSIT, TransactionType.WITHDRAWAL,
    TransactionType.BET, TransactionType.PAYOUT, TransactionType.COMMISSION
]
VALID_TRANSACTION_STATUSES = [
    TransactionStatus.PENDING, TransactionStatus.APPROVED,
    TransactionStatus.REJECTED, TransactionStatus.COMPLETED
]
REVIEW_STATUSES = [TransactionStatus.APPROVED, TransactionStatus.REJECTED]

# Digits per bet type; also the length of the matching draw number
NUMBER_LENGTHS = {
    BetType.TWO_D: 2,
    BetType.THREE_D: 3,
}

# Largest potential payout a bet may carry; fits bets.potential_payout
MAX_PAYOUT = Decimal("9999999999.99")
