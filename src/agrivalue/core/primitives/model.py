# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable snapshots: inputs are owned by the caller and results are
    pure function outputs, so nothing in the engine mutates a model.
    """

    model_config = ConfigDict(
        frozen=True,  # Inputs and results are immutable snapshots
        extra="forbid",  # Catches typos and missing field definitions immediately
    )
