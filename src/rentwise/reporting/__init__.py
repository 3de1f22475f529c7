# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from .formatting import format_currency, format_number, format_percent
from .schedule import (
    SCHEDULE_COLUMNS,
    balance_comparison_frame,
    keep_vs_sell_to_frame,
    schedule_summary,
    schedule_to_frame,
)

__all__ = [
    # Formatting
    "format_currency",
    "format_number",
    "format_percent",
    # Tabular views
    "SCHEDULE_COLUMNS",
    "schedule_to_frame",
    "schedule_summary",
    "balance_comparison_frame",
    "keep_vs_sell_to_frame",
]
