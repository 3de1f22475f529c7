# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models: every calculation takes frozen inputs and returns
    freshly built outputs, so nothing is ever mutated in place.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,  # Inputs are never mutated; recomputes take the same instance
        extra="forbid",  # Catches typos and missing field definitions immediately
    )
