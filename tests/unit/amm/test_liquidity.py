"""Tests for liquidity ratio math."""

from decimal import Decimal

import pytest

from swapcore.amm.liquidity import (
    DepositError,
    DepositPlan,
    calculate_optimal_amounts,
    paired_amount,
    plan_deposit,
    position_share,
    preview_removal,
    quote,
)
from swapcore.errors import InsufficientBalance, InsufficientLiquidity, NegativeAmount


class TestQuote:
    def test_ratio_projection(self) -> None:
        assert quote(50, 1000, 2000) == 100
        assert quote(100, 2000, 1000) == 50

    def test_truncates(self) -> None:
        assert quote(1, 3, 2) == 0
        assert quote(2, 3, 2) == 1

    def test_zero_inputs(self) -> None:
        assert quote(0, 1000, 2000) == 0
        assert quote(50, 0, 2000) == 0
        assert quote(50, 1000, 0) == 0


class TestCalculateOptimalAmounts:
    """Tests for the router's ratio correction."""

    def test_a_binds(self) -> None:
        """quote(50) = 100 <= 200, so B is shrunk to 100."""
        assert calculate_optimal_amounts(50, 200, 45, 90, 1000, 2000) == (50, 100)

    def test_a_binds_but_b_below_floor(self) -> None:
        """b_optimal = 100 < b_min = 150."""
        assert calculate_optimal_amounts(50, 200, 45, 150, 1000, 2000) is None

    def test_b_binds(self) -> None:
        """quote(50 A) = 100 > 50 B, so A is shrunk to quote(50 B) = 25."""
        assert calculate_optimal_amounts(50, 50, 20, 0, 1000, 2000) == (25, 50)

    def test_b_binds_but_a_below_floor(self) -> None:
        assert calculate_optimal_amounts(50, 50, 30, 0, 1000, 2000) is None

    def test_empty_pool_accepts_desired(self) -> None:
        """The first depositor sets the ratio."""
        assert calculate_optimal_amounts(100, 200, 0, 0, 0, 0) == (100, 200)

    def test_result_never_exceeds_desired(self) -> None:
        result = calculate_optimal_amounts(777, 1234, 0, 0, 10**18, 3 * 10**18)
        assert result is not None
        amount_a, amount_b = result
        assert amount_a <= 777
        assert amount_b <= 1234

    def test_negative_desired_raises(self) -> None:
        with pytest.raises(NegativeAmount, match="amount_a_desired"):
            calculate_optimal_amounts(-1, 50, 0, 0, 1000, 2000)


class TestPlanDeposit:
    """Tests for deposit planning with slippage floors."""

    def test_exact_ratio(self) -> None:
        result = plan_deposit(50, 100, 1000, 2000)

        assert result.is_valid
        assert result.plan == DepositPlan(amount_a=50, amount_b=100, amount_a_min=49, amount_b_min=99)

    def test_one_unit_excess_is_trimmed(self) -> None:
        """An extra unit of B is dropped and floors follow the corrected amounts."""
        result = plan_deposit(1000, 2001, 1000, 2000)

        assert result.plan == DepositPlan(
            amount_a=1000, amount_b=2000, amount_a_min=995, amount_b_min=1990
        )

    def test_too_imbalanced(self) -> None:
        """B would be shrunk from 200 to 100, below its 199 floor."""
        result = plan_deposit(50, 200, 1000, 2000)

        assert not result.is_valid
        assert result.plan is None
        assert result.error is DepositError.RATIO_INFEASIBLE
        assert "imbalanced" in result.error.message

    def test_empty_pool(self) -> None:
        result = plan_deposit(100, 200, 0, 0)

        assert result.plan == DepositPlan(amount_a=100, amount_b=200, amount_a_min=99, amount_b_min=199)

    def test_missing_input(self) -> None:
        result = plan_deposit(0, 0, 1000, 2000)

        assert result.error is DepositError.MISSING_INPUT

    def test_custom_slippage(self) -> None:
        result = plan_deposit(1000, 2000, 1000, 2000, slippage_bps=100)

        assert result.plan is not None
        assert result.plan.amount_a_min == 990
        assert result.plan.amount_b_min == 1980


class TestPairedAmount:
    def test_fills_counterpart(self) -> None:
        assert paired_amount(50, 1000, 2000).amount == 100

    def test_dust_reports_insufficient_liquidity(self) -> None:
        result = paired_amount(1, 2000, 1000)

        assert result.amount is None
        assert result.error is DepositError.INSUFFICIENT_LIQUIDITY

    def test_empty_pool_makes_no_suggestion(self) -> None:
        result = paired_amount(50, 0, 0)

        assert result.amount is None
        assert result.error is None

    def test_empty_input(self) -> None:
        assert paired_amount(0, 1000, 2000).amount is None


class TestPositionShare:
    """Tests for LP position valuation."""

    def test_ten_percent(self) -> None:
        position = position_share(100, 1000, 5000, 8000)

        assert position.share_ppm == 100_000
        assert position.amount0 == 500
        assert position.amount1 == 800
        assert position.share_percent == Decimal("10")

    def test_truncates(self) -> None:
        position = position_share(1, 3, 10, 10)

        assert position.share_ppm == 333_333
        assert position.amount0 == 3
        assert position.amount1 == 3
        assert position.share_percent == Decimal("33.3333")

    def test_no_supply(self) -> None:
        position = position_share(0, 0, 5000, 8000)

        assert position.share_ppm == 0
        assert position.amount0 == 0


class TestPreviewRemoval:
    def test_amounts_and_floors(self) -> None:
        preview = preview_removal(100, 200, 1000, 5000, 8000)

        assert preview.amount0 == 500
        assert preview.amount1 == 800
        assert preview.amount0_min == 497
        assert preview.amount1_min == 796

    def test_exceeds_balance(self) -> None:
        with pytest.raises(InsufficientBalance):
            preview_removal(201, 200, 1000, 5000, 8000)

    def test_no_supply(self) -> None:
        with pytest.raises(InsufficientLiquidity):
            preview_removal(0, 0, 0, 5000, 8000)
