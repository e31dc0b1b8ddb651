# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Agrivalue test suite.

Unit tests for the input contracts, the valuation engine and the
reporting layer.
"""
