# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Tabular schedule and projection view tests."""

import pandas as pd
import pytest

from rentwise.debt import AmortizationSchedule, build_schedule
from rentwise.reporting import (
    SCHEDULE_COLUMNS,
    balance_comparison_frame,
    keep_vs_sell_to_frame,
    schedule_summary,
    schedule_to_frame,
)
from rentwise.valuation import calculate_keep_vs_sell


@pytest.fixture
def baseline(default_loan):
    return build_schedule(default_loan)


@pytest.fixture
def accelerated(default_loan):
    return build_schedule(default_loan, extra_monthly=500.0)


class TestScheduleFrame:
    def test_one_row_per_payment(self, baseline):
        frame = schedule_to_frame(baseline)

        assert list(frame.columns) == SCHEDULE_COLUMNS
        assert len(frame) == baseline.months
        assert frame["Period"].tolist() == list(range(1, baseline.months + 1))

    def test_monthly_period_index(self, baseline):
        frame = schedule_to_frame(baseline)

        assert isinstance(frame.index, pd.PeriodIndex)
        assert frame.index.name == "Month"
        assert frame.index[0] == pd.Period("2025-07", freq="M")
        assert frame.index[12] == pd.Period("2026-07", freq="M")

    def test_balances_chain(self, baseline, default_loan):
        frame = schedule_to_frame(baseline)

        assert frame["Begin Balance"].iloc[0] == pytest.approx(default_loan.principal)
        assert frame["End Balance"].iloc[-1] == 0.0
        # Each month starts where the previous one ended
        assert frame["Begin Balance"].iloc[1:].to_numpy() == pytest.approx(
            frame["End Balance"].iloc[:-1].to_numpy()
        )

    def test_empty_schedule(self):
        frame = schedule_to_frame(AmortizationSchedule())

        assert frame.empty
        assert list(frame.columns) == SCHEDULE_COLUMNS


class TestScheduleSummary:
    def test_totals(self, accelerated):
        summary = schedule_summary(accelerated)

        assert summary["Months"] == accelerated.months
        assert summary["Payoff Date"] == accelerated.payoff_date
        assert summary["Total Interest Paid"] == pytest.approx(accelerated.total_interest)
        assert summary["Total Extra Payments"] == pytest.approx(accelerated.total_extra)
        assert summary["Last Payment Amount"] == accelerated.entries[-1].total_payment
        assert bool(summary["Converged"])

    def test_empty_schedule(self):
        summary = schedule_summary(AmortizationSchedule())

        assert summary["Months"] == 0
        assert summary["Last Payment Amount"] == 0.0
        assert pd.isna(summary["Payoff Date"])


class TestBalanceComparison:
    def test_spans_baseline_horizon(self, baseline, accelerated):
        frame = balance_comparison_frame(baseline, accelerated)

        assert list(frame.columns) == ["Original Balance", "Accelerated Balance"]
        assert len(frame) == baseline.months
        assert (frame["Accelerated Balance"] <= frame["Original Balance"] + 1e-9).all()

    def test_accelerated_balance_zero_after_payoff(self, baseline, accelerated):
        frame = balance_comparison_frame(baseline, accelerated)

        tail = frame["Accelerated Balance"].iloc[accelerated.months :]
        assert len(tail) == baseline.months - accelerated.months
        assert (tail == 0.0).all()


class TestKeepVsSellFrame:
    def test_year_indexed(self, sample_property, sample_tax_inputs):
        analysis = calculate_keep_vs_sell(sample_property, sample_tax_inputs, num_years=5)

        frame = keep_vs_sell_to_frame(analysis)

        assert frame.index.name == "year"
        assert frame.index.tolist() == [1, 2, 3, 4, 5]
        assert frame.loc[5, "total_return"] == pytest.approx(analysis.final_year_keep_value)
        assert "keep_advantage" in frame.columns
