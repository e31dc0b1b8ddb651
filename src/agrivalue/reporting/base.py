# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Base reporting classes.

Reports operate on finished parcel results and only format and present
data; they never perform valuation calculations themselves.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from ..core.primitives import GlobalSettings
from ..valuation.results import ParcelValuationResult


class BaseReport(ABC):
    """
    Abstract base class for all report formatters.
    """

    def __init__(
        self,
        results: ParcelValuationResult,
        settings: Optional[GlobalSettings] = None,
    ):
        """
        Initialize report with valuation results.

        Args:
            results: ParcelValuationResult from agrivalue.valuation.value_parcel()
            settings: Engine settings; defaults when omitted
        """
        if not isinstance(results, ParcelValuationResult):
            raise TypeError("BaseReport requires a ParcelValuationResult object")
        self._results = results
        self._settings = settings or GlobalSettings()

    @abstractmethod
    def generate(self, **kwargs) -> Any:
        """
        Generate the formatted report output.

        This method should transform the valuation results into the
        appropriate output format (DataFrame, dict, etc.) without
        performing any valuation calculations.
        """
        pass
