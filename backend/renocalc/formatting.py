"""Formatting helpers for cost breakdown output.

Provides human-readable text for currency amounts, estimate ranges, areas
and surcharge percentages, the way a homeowner would read them
(e.g., '$10,350 – $12,650').
"""

from __future__ import annotations


def format_currency(amount: float) -> str:
    """Format a currency amount as a human-readable string.

    - Amounts >= $10,000: no cents, with comma separators (e.g., '$11,500')
    - Amounts < $10,000: with cents (e.g., '$5,040.00')
    """
    if amount >= 10_000:
        return f"${amount:,.0f}"
    return f"${amount:,.2f}"


def format_total_range(low: float, high: float) -> str:
    """Format the low/high totals as '$X – $Y'."""
    return f"{format_currency(low)} – {format_currency(high)}"


def format_area(sq_ft: float, *, estimated: bool = False) -> str:
    """Format an area as 'N SF', prefixed with '~' when it is approximate."""
    text = f"{sq_ft:,.0f} SF"
    return f"~{text}" if estimated else text


def format_linear_feet(lf: float) -> str:
    return f"{lf:,.1f} LF"


def format_surcharge(multiplier: float) -> str:
    """Format a scope multiplier as a surcharge, e.g. 0.15 -> '+15%'."""
    return f"+{multiplier * 100:.0f}%"
