# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentwise Core Framework

Foundational building blocks for the financial calculators: primitives
(models, types, enums, settings) and default demo inputs.
"""

from . import primitives
from .primitives import (
    CalculationSettings,
    FilingStatusEnum,
    FloatBetween0And1,
    GlobalSettings,
    Model,
    PositiveFloat,
    PositiveInt,
    ProjectionSettings,
    RecommendationEnum,
    TaxBracket,
    TaxSettings,
)

__all__ = [
    "primitives",
    # Core models
    "Model",
    # Settings
    "GlobalSettings",
    "CalculationSettings",
    "TaxSettings",
    "ProjectionSettings",
    "TaxBracket",
    # Enums
    "FilingStatusEnum",
    "RecommendationEnum",
    # Types
    "FloatBetween0And1",
    "PositiveFloat",
    "PositiveInt",
]
