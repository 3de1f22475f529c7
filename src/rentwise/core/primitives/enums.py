# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class FilingStatusEnum(str, Enum):
    """
    US federal income tax filing status.

    Only MARRIED_FILING_JOINTLY has its own bracket tables; the remaining
    statuses share the single-filer tables (a simplification, not a full
    tax calculation).
    """

    SINGLE = "single"
    MARRIED_FILING_JOINTLY = "married_filing_jointly"
    MARRIED_FILING_SEPARATELY = "married_filing_separately"
    HEAD_OF_HOUSEHOLD = "head_of_household"


class RecommendationEnum(str, Enum):
    """Outcome of a keep-vs-sell comparison."""

    KEEP = "keep"
    SELL = "sell"
    NEUTRAL = "neutral"
