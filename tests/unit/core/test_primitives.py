# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tests for core primitives: tier ordering and engine settings.
"""

import pytest
from pydantic import ValidationError

from agrivalue.core.primitives import (
    DEFAULT_COST_CURVE_ALIASES,
    ConfidenceTier,
    CostCurveAlias,
    GlobalSettings,
    ValuationSettings,
)


class TestConfidenceTier:
    """Worst-wins aggregation of tiers."""

    def test_severity_order(self):
        assert (
            ConfidenceTier.A.severity
            < ConfidenceTier.B.severity
            < ConfidenceTier.C.severity
        )

    @pytest.mark.parametrize(
        "tiers, expected",
        [
            (["A"], ConfidenceTier.A),
            (["A", "A"], ConfidenceTier.A),
            (["A", "B"], ConfidenceTier.B),
            (["B", "A", "B"], ConfidenceTier.B),
            (["B", "C"], ConfidenceTier.C),
            (["C", "A"], ConfidenceTier.C),
            ([], ConfidenceTier.A),
        ],
    )
    def test_worst(self, tiers, expected):
        assert ConfidenceTier.worst(ConfidenceTier(t) for t in tiers) == expected

    def test_explanations(self):
        assert ConfidenceTier.A.explanation == "Verified data with evidence"
        assert ConfidenceTier.C.explanation == "Provisional - requires review"


class TestSettings:
    """Tests for the engine settings tree."""

    def test_defaults(self):
        settings = GlobalSettings()

        assert settings.valuation.days_per_year == 365
        assert settings.valuation.default_realization_factor == 1.0
        assert settings.valuation.default_inp_factor == 0.40
        assert settings.valuation.inp_factor_range == (0.30, 0.50)
        assert settings.valuation.cost_curve_aliases == DEFAULT_COST_CURVE_ALIASES
        assert settings.valuation.calculation_version == "1.0"
        assert settings.reporting.include_calculation_steps is True

    def test_inverted_inp_range_rejected(self):
        with pytest.raises(ValidationError, match="inp_factor_range"):
            ValuationSettings(inp_factor_range=(0.5, 0.3))

    def test_days_per_year_must_be_positive(self):
        with pytest.raises(ValidationError):
            ValuationSettings(days_per_year=0)

    def test_alias_matching_is_case_insensitive(self):
        rule = CostCurveAlias(tokens=("OXG",), aliases=("x",))

        assert rule.matches("palm_oxg_2020")
        assert not rule.matches("palm_guineensis")
