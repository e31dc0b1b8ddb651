# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import Field

from .block import BlockData
from .primitives import Model


class ParcelData(Model):
    """
    Parcel header plus its blocks.

    Block order does not affect results. Block ids are expected to be
    unique but the engine does not enforce it.
    """

    valuation_asof_date: date = Field(...)
    parcel_id: str = Field(...)
    operator_name: Optional[str] = None
    region: Optional[str] = None
    total_parcel_area_ha: Optional[float] = None
    blocks: List[BlockData] = Field(default_factory=list)
