# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ..core.primitives import QAFlag


@dataclass
class CalculationTrace:
    """
    Ordered accumulator for one block's calculation steps and QA flags.

    A fresh trace is created per block valuation and its lists are copied
    onto the returned result; nothing outlives the call.
    """

    steps: List[str] = field(default_factory=list)
    qa_flags: List[str] = field(default_factory=list)

    def step(self, message: str) -> None:
        self.steps.append(message)

    def flag(self, flag: QAFlag) -> None:
        self.qa_flags.append(flag.value)

    def flag_once(self, flag: QAFlag) -> None:
        """Record ``flag`` unless this trace already carries it."""
        if flag.value not in self.qa_flags:
            self.qa_flags.append(flag.value)
