# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Valuation Metrics Unit Tests

Unit tests for the ValuationMetrics helpers: discount-rate clamping,
present value, IRR via PyXIRR and break-even age.
"""

import math

import pytest

from agrivalue.valuation import ValuationMetrics


class TestSafeDiscountRate:
    """Test discount rate clamping."""

    @pytest.mark.parametrize("rate", [-1.0, -1.5, None, math.nan])
    def test_clamped_to_zero(self, rate):
        assert ValuationMetrics.safe_discount_rate(rate) == 0.0

    @pytest.mark.parametrize("rate", [0.0, 0.1, -0.5])
    def test_passthrough(self, rate):
        assert ValuationMetrics.safe_discount_rate(rate) == rate


class TestPresentValue:
    """Test discounting of annual flows."""

    def test_single_flow(self):
        assert ValuationMetrics.present_value([110.0], 0.10) == pytest.approx(100.0)

    def test_start_power(self):
        assert ValuationMetrics.present_value([121.0], 0.10, start=2) == pytest.approx(
            100.0
        )

    def test_multiple_flows(self):
        pv = ValuationMetrics.present_value([100.0, 100.0], 0.0, start=2)
        assert pv == pytest.approx(200.0)

    def test_no_flows(self):
        assert ValuationMetrics.present_value([], 0.10) == 0.0


class TestIRR:
    """Test internal rate of return."""

    def test_simple_irr(self):
        assert ValuationMetrics.calculate_irr([-100.0, 110.0]) == pytest.approx(0.10)

    def test_no_sign_change(self):
        assert ValuationMetrics.calculate_irr([100.0, 100.0]) is None
        assert ValuationMetrics.calculate_irr([-100.0, -10.0]) is None

    def test_cash_flow_vector(self):
        assert ValuationMetrics.cash_flow_vector(50.0, 10.0, [20.0, 30.0]) == [
            -50.0,
            10.0,
            20.0,
            30.0,
        ]


class TestBreakEvenAge:
    """Test break-even age search."""

    def test_already_reached(self):
        assert ValuationMetrics.break_even_age(5, 100.0, 80.0, [], []) == 5

    def test_reached_in_projection(self):
        age = ValuationMetrics.break_even_age(5, 50.0, 100.0, [40.0, 40.0], [10.0, 10.0])
        assert age == 7

    def test_never_reached(self):
        age = ValuationMetrics.break_even_age(5, 0.0, 100.0, [10.0], [20.0])
        assert age is None
