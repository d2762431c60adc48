"""Simplified taxation system: tax on profits and on profits minus losses."""

from __future__ import annotations

from fractions import Fraction

from taxcalc.money import MoneyNotes

PROFITS_TAX_RATE = Fraction("0.06")
PROFITS_MINUS_LOSSES_TAX_RATE = Fraction("0.15")
PROFITS_MIN_TAX_RATE = Fraction("0.01")


def _apply(rate: Fraction, amount: int) -> int:
    return int(rate * amount)


def profits_tax(profits: MoneyNotes, year: int) -> int:
    """Tax on the year's profits, never below the minimum tax."""
    total = profits.year_sum(year)
    return max(_apply(PROFITS_TAX_RATE, total), _apply(PROFITS_MIN_TAX_RATE, total))


def profits_minus_losses_tax(profits: MoneyNotes, losses: MoneyNotes, year: int) -> int:
    """Tax on the year's profits less losses, never below the minimum tax.

    The minimum tax is taken on profits alone; a loss larger than the
    profits leaves a taxable base of zero.
    """
    income = profits.year_sum(year)
    spent = losses.year_sum(year)
    base = max(income - spent, 0)
    return max(
        _apply(PROFITS_MINUS_LOSSES_TAX_RATE, base),
        _apply(PROFITS_MIN_TAX_RATE, income),
    )