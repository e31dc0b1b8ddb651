# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Valuation Metrics - Time Value of Money Calculations

Discounting, internal rate of return and break-even helpers used by the
block valuator. All functions are pure and return finite numbers (or None
where a metric is undefined).
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

from pyxirr import InvalidPaymentsError, irr


class ValuationMetrics:
    """
    Standard discounted cash flow calculations for block valuation.

    Cash flows are annual. The current year's net income is discounted at
    power 1 and each subsequent projected year at the next integer power.
    """

    @staticmethod
    def safe_discount_rate(rate: Optional[float]) -> float:
        """
        Discount rate usable in ``(1 + rate) ** k``.

        Rates at or below -100% (and missing or NaN rates) become 0 so the
        discount factor stays finite and positive.
        """
        if rate is None or math.isnan(rate) or rate <= -1:
            return 0.0
        return rate

    @staticmethod
    def present_value(cash_flows: Sequence[float], rate: float, start: int = 1) -> float:
        """
        Present value of annual cash flows, the first discounted at ``start``.

        Args:
            cash_flows: Annual net cash flows in chronological order
            rate: Discount rate as decimal (already made safe)
            start: Discount power applied to the first flow

        Returns:
            Sum of discounted cash flows (0.0 for no flows)
        """
        pv = 0.0
        for period, cf in enumerate(cash_flows, start=start):
            pv += cf / ((1.0 + rate) ** period)
        return pv

    @staticmethod
    def calculate_irr(cash_flows: Sequence[float]) -> Optional[float]:
        """
        Internal rate of return of annual cash flows using PyXIRR.

        Returns:
            IRR as decimal, or None when the flows have no sign change or
            the solver does not converge
        """
        try:
            result = irr(list(cash_flows))
        except InvalidPaymentsError:
            return None
        if result is None or not math.isfinite(result):
            return None
        return float(result)

    @staticmethod
    def break_even_age(
        current_age: int,
        inflows: float,
        outflows: float,
        projected_revenues: Sequence[float],
        projected_costs: Sequence[float],
    ) -> Optional[int]:
        """
        First age at which cumulative inflows cover cumulative outflows.

        Starts from the current-period position and accumulates each
        projected year's revenue and direct cost.

        Returns:
            The current age if already covered, the first projected age
            that covers it, or None
        """
        if inflows >= outflows:
            return current_age
        running_in, running_out = inflows, outflows
        for offset, (revenue, cost) in enumerate(
            zip(projected_revenues, projected_costs), start=1
        ):
            running_in += revenue
            running_out += cost
            if running_in >= running_out:
                return current_age + offset
        return None

    @staticmethod
    def cash_flow_vector(
        investment_basis: float, current_net: float, future_flows: List[float]
    ) -> List[float]:
        """Flows used for IRR: initial outlay, current net, then projections."""
        return [-investment_basis, current_net, *future_flows]
