# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
rentwise Core Primitives

Essential building blocks shared by every calculator: the immutable model
base, constrained numeric types, enums and the settings tree.
"""

from .enums import FilingStatusEnum, RecommendationEnum
from .model import Model
from .settings import (
    FEDERAL_INCOME_BRACKETS_MFJ,
    FEDERAL_INCOME_BRACKETS_SINGLE,
    LTCG_BRACKETS_MFJ,
    LTCG_BRACKETS_SINGLE,
    CalculationSettings,
    GlobalSettings,
    ProjectionSettings,
    TaxBracket,
    TaxSettings,
)
from .types import FloatBetween0And1, PositiveFloat, PositiveInt

__all__ = [
    # Core models
    "Model",
    # Settings
    "GlobalSettings",
    "CalculationSettings",
    "TaxSettings",
    "ProjectionSettings",
    "TaxBracket",
    # Bracket tables
    "FEDERAL_INCOME_BRACKETS_SINGLE",
    "FEDERAL_INCOME_BRACKETS_MFJ",
    "LTCG_BRACKETS_SINGLE",
    "LTCG_BRACKETS_MFJ",
    # Enums
    "FilingStatusEnum",
    "RecommendationEnum",
    # Types
    "PositiveFloat",
    "PositiveInt",
    "FloatBetween0And1",
]
