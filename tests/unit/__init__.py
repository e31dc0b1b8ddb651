# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for Agrivalue components.

Each test values blocks and parcels against in-memory lookup tables; no
external services are involved.
"""
