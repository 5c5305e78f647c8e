"""Tests for number validation, payouts and game limits."""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.betting.domain import BetRules, GameConfig, quantize_money
from src.core import ValidationException


class TestValidateNumber:
    @pytest.mark.parametrize("bet_type,number", [
        ("2D", "00"), ("2D", "07"), ("2D", "99"),
        ("3D", "000"), ("3D", "415"), ("3D", "999"),
    ])
    def test_accepts_exact_digit_count(self, bet_type, number):
        assert BetRules.validate_number(bet_type, number) == number

    @pytest.mark.parametrize("bet_type,number", [
        ("2D", "7"), ("2D", "123"), ("2D", "a1"), ("2D", " 7"),
        ("3D", "12"), ("3D", "1234"), ("3D", "12x"),
        ("2D", "٠١"),  # non-ASCII digits
    ])
    def test_rejects_malformed_numbers(self, bet_type, number):
        with pytest.raises(ValidationException, match=f"Invalid {bet_type} number format"):
            BetRules.validate_number(bet_type, number)

    def test_rejects_unknown_bet_type(self):
        with pytest.raises(ValidationException, match="Invalid bet type"):
            BetRules.validate_number("4D", "1234")


class TestPayout:
    def test_two_digit_payout(self):
        assert BetRules.calculate_payout(Decimal("100"), 85) == Decimal("8500.00")

    def test_three_digit_payout(self):
        assert BetRules.calculate_payout(Decimal("10.50"), 500) == Decimal("5250.00")

    def test_quantize_rounds_half_up(self):
        assert quantize_money(Decimal("1.005")) == Decimal("1.01")

    def test_winning_requires_exact_match(self):
        assert BetRules.is_winning("07", "07")
        assert not BetRules.is_winning("07", "70")
        assert not BetRules.is_winning("07", None)

    def test_payout_cap(self):
        BetRules.check_payout(Decimal("9999999999.99"))

        with pytest.raises(ValidationException, match="Potential payout exceeds the maximum"):
            BetRules.check_payout(Decimal("10000000000.00"))


class TestGameConfig:
    def test_defaults(self):
        config = GameConfig()
        assert config.get_odds("2D") == 85
        assert config.get_odds("3D") == 500
        assert config.referral_bonus == Decimal("50.00")
        assert config.min_deposit == Decimal("1000.00")

    def test_missing_odds_are_filled_in(self):
        config = GameConfig(odds={"2D": 90})
        assert config.odds == {"2D": 90, "3D": 500}

    def test_missing_odds_leave_input_untouched(self):
        odds = {"3D": 600}
        config = GameConfig(odds=odds)

        assert odds == {"3D": 600}
        assert config.odds == {"2D": 85, "3D": 600}

    def test_rejects_unknown_bet_type_in_odds(self):
        with pytest.raises(ValidationError):
            GameConfig(odds={"4D": 5000})

    def test_rejects_non_positive_odds(self):
        with pytest.raises(ValidationError):
            GameConfig(odds={"2D": 0})

    def test_rejects_max_below_min(self):
        with pytest.raises(ValidationError):
            GameConfig(min_bet=Decimal("100"), max_bet=Decimal("50"))

    def test_check_stake_limits(self):
        config = GameConfig(min_bet=Decimal("100"), max_bet=Decimal("10000"))
        config.check_stake(Decimal("100"))
        config.check_stake(Decimal("10000"))

        with pytest.raises(ValidationException, match="Minimum bet is 100"):
            config.check_stake(Decimal("99.99"))
        with pytest.raises(ValidationException, match="Maximum bet is 10000"):
            config.check_stake(Decimal("10000.01"))
