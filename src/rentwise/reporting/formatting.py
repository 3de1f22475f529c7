# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""US-locale display formatting for currency, percentages and plain numbers."""

from __future__ import annotations


def format_number(value: float, decimals: int = 0) -> str:
    """Thousands-separated number, e.g. ``format_number(1234.567, 2) -> '1,234.57'``."""
    return f"{value:,.{decimals}f}"


def format_currency(value: float, decimals: int = 0) -> str:
    """Dollar amount with the sign ahead of the symbol: ``-$500``."""
    formatted = format_number(abs(value), decimals)
    if round(value, decimals) < 0:
        return f"-${formatted}"
    return f"${formatted}"


def format_percent(value: float, decimals: int = 1) -> str:
    """Format a value already expressed in percent: ``format_percent(7.5) -> '7.5%'``."""
    return f"{format_number(value, decimals)}%"
