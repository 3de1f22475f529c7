# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tabular Views

pandas views of amortization schedules and keep-vs-sell projections for
tables and charts. Schedules are indexed by monthly ``pd.Period``.
"""

from __future__ import annotations

import pandas as pd

from ..debt.amortization import AmortizationSchedule
from ..valuation.keep_vs_sell import KeepVsSellAnalysis

SCHEDULE_COLUMNS = [
    "Period",
    "Begin Balance",
    "Payment",
    "Interest",
    "Principal",
    "Extra",
    "End Balance",
]


def schedule_to_frame(schedule: AmortizationSchedule) -> pd.DataFrame:
    """
    Convert a schedule to a DataFrame indexed by payment month.

    Returns:
        DataFrame with columns:
            - Period: 1-based payment number
            - Begin Balance: Balance before the payment
            - Payment: Total payment (principal + interest + extra)
            - Interest: Interest portion
            - Principal: Principal retired by the base payment
            - Extra: Extra and one-time principal
            - End Balance: Balance after the payment
    """
    if schedule.is_empty:
        return pd.DataFrame(
            columns=SCHEDULE_COLUMNS,
            index=pd.PeriodIndex([], freq="M", name="Month"),
        )

    rows = []
    for entry in schedule.entries:
        begin_balance = entry.remaining_balance + entry.principal_paid + entry.extra_payment
        rows.append(
            {
                "Period": entry.month_index,
                "Begin Balance": begin_balance,
                "Payment": entry.total_payment,
                "Interest": entry.interest_paid,
                "Principal": entry.principal_paid,
                "Extra": entry.extra_payment,
                "End Balance": entry.remaining_balance,
            }
        )

    index = pd.PeriodIndex(
        [
            pd.Period(year=entry.payment_date.year, month=entry.payment_date.month, freq="M")
            for entry in schedule.entries
        ],
        freq="M",
        name="Month",
    )
    return pd.DataFrame(rows, columns=SCHEDULE_COLUMNS, index=index)


def schedule_summary(schedule: AmortizationSchedule) -> pd.Series:
    """
    Summary statistics for a schedule.

    Returns:
        Series with Payoff Date, Total Payments, Total Principal Paid,
        Total Interest Paid, Total Extra Payments, Last Payment Amount,
        Months and Converged.
    """
    last = schedule.last_entry
    return pd.Series(
        {
            "Payoff Date": schedule.payoff_date,
            "Total Payments": schedule.total_paid,
            "Total Principal Paid": schedule.total_principal,
            "Total Interest Paid": schedule.total_interest,
            "Total Extra Payments": schedule.total_extra,
            "Last Payment Amount": last.total_payment if last is not None else 0.0,
            "Months": schedule.months,
            "Converged": schedule.converged,
        }
    )


def balance_comparison_frame(
    original: AmortizationSchedule, accelerated: AmortizationSchedule
) -> pd.DataFrame:
    """
    Remaining balance of both schedules on a shared monthly index.

    The accelerated balance is filled with 0 after its payoff so both lines
    span the baseline horizon.
    """
    original_balance = schedule_to_frame(original)["End Balance"].rename("Original Balance")
    accelerated_balance = schedule_to_frame(accelerated)["End Balance"].rename(
        "Accelerated Balance"
    )
    frame = pd.concat([original_balance, accelerated_balance], axis=1)
    return frame.astype(float).fillna(0.0)


def keep_vs_sell_to_frame(analysis: KeepVsSellAnalysis) -> pd.DataFrame:
    """Year-indexed projection table of a keep-vs-sell analysis."""
    frame = pd.DataFrame(
        [projection.model_dump() for projection in analysis.projections],
        columns=[
            "year",
            "equity_value",
            "cumulative_cash_flow",
            "total_return",
            "alternative_investment_value",
            "keep_advantage",
        ],
    )
    return frame.set_index("year")
