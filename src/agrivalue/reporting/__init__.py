# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Agrivalue Reporting Module

Flat records for persistence and pandas tables for report rendering,
produced from finished valuation results.
"""

from .base import BaseReport
from .parcel_report import ParcelValuationReport
from .records import FLAG_SEPARATOR, block_record, parcel_record

__all__ = [
    "BaseReport",
    "ParcelValuationReport",
    "block_record",
    "parcel_record",
    "FLAG_SEPARATOR",
]
