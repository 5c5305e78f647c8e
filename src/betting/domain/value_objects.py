"""
Betting Value Objects
=====================

Game rules for 2D/3D draws.

Value objects are defined by their attributes rather than an identity.
They are immutable and can be freely shared.
"""

from abc import ABC, abstractmethod
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from src.config import BetType, MAX_PAYOUT, NUMBER_LENGTHS, VALID_BET_TYPES
from src.core import ValidationException

CENTS = Decimal("0.01")


def quantize_money(value: Decimal) -> Decimal:
    """Round a money amount to 2 decimal places."""
    return Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)


class BetRules:
    """
    Pure functions for bet validation and payout calculation.

    Stateless utility class - every rule about numbers and payouts lives here.
    """

    @staticmethod
    def validate_number(bet_type: str, number: str) -> str:
        """
        Check that a number has the exact digit count of its game.

        Leading zeros are significant: "07" is a valid 2D number, "7" is not.

        Raises:
            ValidationException: On unknown type or malformed number
        """
        if bet_type not in VALID_BET_TYPES:
            raise ValidationException(f"Invalid bet type: {bet_type}")

        length = NUMBER_LENGTHS[bet_type]
        if len(number) != length or not number.isascii() or not number.isdigit():
            raise ValidationException(f"Invalid {bet_type} number format")
        return number

    @staticmethod
    def calculate_payout(amount: Decimal, odds: int) -> Decimal:
        """
        Payout credited when a bet wins.

        Example:
            100.00 on 2D at odds 85 pays 8500.00
        """
        return quantize_money(Decimal(amount) * odds)

    @staticmethod
    def check_payout(payout: Decimal) -> None:
        """
        Raises:
            ValidationException: If the payout is larger than the ledger can hold
        """
        if payout > MAX_PAYOUT:
            raise ValidationException(f"Potential payout exceeds the maximum of {MAX_PAYOUT}")

    @staticmethod
    def is_winning(number: str, winning_number: Optional[str]) -> bool:
        """A bet wins only on an exact string match with a published number."""
        return winning_number is not None and number == winning_number


class GameConfig(BaseModel):
    """
    Game rules loaded from YAML.

    Payout = stake x odds[bet type]
    """
    odds: Dict[str, int] = Field(
        default_factory=lambda: {BetType.TWO_D: 85, BetType.THREE_D: 500},
        description="Payout multiplier per bet type"
    )
    min_bet: Decimal = Field(default=Decimal("1.00"), gt=0, description="Smallest stake")
    max_bet: Optional[Decimal] = Field(default=None, gt=0, description="Largest stake")
    referral_bonus: Decimal = Field(
        default=Decimal("50.00"),
        ge=0,
        description="Commission credited to a referrer per sign-up"
    )
    min_deposit: Decimal = Field(
        default=Decimal("1000.00"),
        ge=0,
        description="Smallest deposit request accepted"
    )

    @field_validator("odds")
    @classmethod
    def validate_odds(cls, v: Dict[str, int]) -> Dict[str, int]:
        """Fill in missing bet types and reject non-positive odds."""
        odds = {BetType.TWO_D: 85, BetType.THREE_D: 500, **v}
        for bet_type, multiplier in odds.items():
            if bet_type not in VALID_BET_TYPES:
                raise ValueError(f"unknown bet type in odds: {bet_type}")
            if multiplier <= 0:
                raise ValueError(f"odds for {bet_type} must be positive")
        return odds

    @model_validator(mode="after")
    def validate_limits(self) -> "GameConfig":
        if self.max_bet is not None and self.max_bet < self.min_bet:
            raise ValueError("max_bet cannot be lower than min_bet")
        return self

    def get_odds(self, bet_type: str) -> int:
        return self.odds[bet_type]

    def check_stake(self, amount: Decimal) -> None:
        """
        Raises:
            ValidationException: If the stake is outside configured limits
        """
        if amount < self.min_bet:
            raise ValidationException(f"Minimum bet is {self.min_bet}")
        if self.max_bet is not None and amount > self.max_bet:
            raise ValidationException(f"Maximum bet is {self.max_bet}")


class IGameConfigProvider(ABC):
    """Interface for game rules access."""

    @abstractmethod
    def get_config(self) -> GameConfig:
        """Get current game configuration."""
