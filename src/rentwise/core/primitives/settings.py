# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Dict, Optional, Tuple

from pydantic import Field, model_validator

from .enums import FilingStatusEnum
from .model import Model
from .types import FloatBetween0And1, PositiveFloat, PositiveInt


class TaxBracket(Model):
    """One bracket of a progressive rate table. ``upper=None`` is unbounded."""

    lower: PositiveFloat
    upper: Optional[PositiveFloat] = None
    rate: FloatBetween0And1

    @model_validator(mode="after")
    def check_bounds(self) -> "TaxBracket":
        if self.upper is not None and self.upper <= self.lower:
            raise ValueError(
                f"Bracket upper bound ({self.upper}) must exceed lower bound ({self.lower})"
            )
        return self

    @property
    def width(self) -> float:
        return float("inf") if self.upper is None else self.upper - self.lower

    def contains(self, income: float) -> bool:
        return income >= self.lower and (self.upper is None or income < self.upper)


def _brackets(*rows: Tuple[float, Optional[float], float]) -> Tuple[TaxBracket, ...]:
    return tuple(TaxBracket(lower=lo, upper=hi, rate=rate) for lo, hi, rate in rows)


# 2024 federal rates (simplified)
FEDERAL_INCOME_BRACKETS_SINGLE = _brackets(
    (0.0, 11_600.0, 0.10),
    (11_600.0, 47_150.0, 0.12),
    (47_150.0, 100_525.0, 0.22),
    (100_525.0, 191_950.0, 0.24),
    (191_950.0, 243_725.0, 0.32),
    (243_725.0, 609_350.0, 0.35),
    (609_350.0, None, 0.37),
)

FEDERAL_INCOME_BRACKETS_MFJ = _brackets(
    (0.0, 23_200.0, 0.10),
    (23_200.0, 94_300.0, 0.12),
    (94_300.0, 201_050.0, 0.22),
    (201_050.0, 383_900.0, 0.24),
    (383_900.0, 487_450.0, 0.32),
    (487_450.0, 731_200.0, 0.35),
    (731_200.0, None, 0.37),
)

LTCG_BRACKETS_SINGLE = _brackets(
    (0.0, 47_025.0, 0.00),
    (47_025.0, 518_900.0, 0.15),
    (518_900.0, None, 0.20),
)

LTCG_BRACKETS_MFJ = _brackets(
    (0.0, 94_050.0, 0.00),
    (94_050.0, 583_750.0, 0.15),
    (583_750.0, None, 0.20),
)


class CalculationSettings(Model):
    """
    Numeric tolerances and iteration caps for the amortization engine.

    Money is plain ``float``; these settings make the rounding policy explicit
    instead of scattering epsilons through the calculators.
    """

    balance_epsilon: PositiveFloat = Field(
        default=0.005,
        description="Balances at or below this amount are treated as paid off (float dust).",
    )
    max_schedule_months: PositiveInt = Field(
        default=720,
        ge=1,
        description="Safety cap on schedule length (60 years). Guarantees termination.",
    )
    solver_tolerance: PositiveFloat = Field(
        default=0.01,
        description="Residual balance the payoff solver accepts as paid off (one cent).",
    )
    max_solver_iterations: PositiveInt = Field(
        default=100,
        ge=1,
        description="Upper bound on bisection iterations in the payoff solver.",
    )


class TaxSettings(Model):
    """Federal and state tax assumptions for sale estimates."""

    depreciation_years: PositiveFloat = Field(
        default=27.5,
        gt=0,
        description="Straight-line recovery period for residential rental property.",
    )
    income_brackets: Dict[FilingStatusEnum, Tuple[TaxBracket, ...]] = Field(
        default_factory=lambda: {
            FilingStatusEnum.MARRIED_FILING_JOINTLY: FEDERAL_INCOME_BRACKETS_MFJ,
        },
        description="Ordinary income brackets by filing status. Missing statuses use default_income_brackets.",
    )
    default_income_brackets: Tuple[TaxBracket, ...] = Field(
        default=FEDERAL_INCOME_BRACKETS_SINGLE,
    )
    ltcg_brackets: Dict[FilingStatusEnum, Tuple[TaxBracket, ...]] = Field(
        default_factory=lambda: {
            FilingStatusEnum.MARRIED_FILING_JOINTLY: LTCG_BRACKETS_MFJ,
        },
        description="Long-term capital gains brackets by filing status.",
    )
    default_ltcg_brackets: Tuple[TaxBracket, ...] = Field(
        default=LTCG_BRACKETS_SINGLE,
    )
    depreciation_recapture_rate: FloatBetween0And1 = Field(
        default=0.25,
        description="Maximum federal rate on unrecaptured depreciation.",
    )
    niit_rate: FloatBetween0And1 = Field(
        default=0.038, description="Net Investment Income Tax rate."
    )
    niit_threshold_single: PositiveFloat = Field(default=200_000.0)
    niit_threshold_mfj: PositiveFloat = Field(default=250_000.0)

    @model_validator(mode="after")
    def check_tables(self) -> "TaxSettings":
        tables = [self.default_income_brackets, self.default_ltcg_brackets]
        tables.extend(self.income_brackets.values())
        tables.extend(self.ltcg_brackets.values())
        for table in tables:
            if not table:
                raise ValueError("Bracket tables must contain at least one bracket")
            if table[-1].upper is not None:
                raise ValueError("The last bracket of a table must be unbounded")
        return self

    def income_brackets_for(self, status: FilingStatusEnum) -> Tuple[TaxBracket, ...]:
        return self.income_brackets.get(status, self.default_income_brackets)

    def ltcg_brackets_for(self, status: FilingStatusEnum) -> Tuple[TaxBracket, ...]:
        return self.ltcg_brackets.get(status, self.default_ltcg_brackets)

    def niit_threshold_for(self, status: FilingStatusEnum) -> float:
        if status == FilingStatusEnum.MARRIED_FILING_JOINTLY:
            return self.niit_threshold_mfj
        return self.niit_threshold_single


class ProjectionSettings(Model):
    """Assumptions for the keep-vs-sell projection."""

    principal_paydown_share: FloatBetween0And1 = Field(
        default=0.4,
        description="Average share of annual P&I assumed to reduce principal.",
    )
    recommendation_threshold_pct: PositiveFloat = Field(
        default=15.0,
        description="Final-year advantage (percent) beyond which keep/sell is recommended.",
    )


# --- Main Global Settings Class ---


class GlobalSettings(Model):
    """Global model settings

    Groups every tunable constant of the engine by functional area. Each
    calculator accepts an optional instance; omitting it uses the defaults.
    """

    calculation: CalculationSettings = Field(default_factory=CalculationSettings)
    tax: TaxSettings = Field(default_factory=TaxSettings)
    projection: ProjectionSettings = Field(default_factory=ProjectionSettings)
