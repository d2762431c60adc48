from taxcalc.money import Date, MoneyNotes
from taxcalc.sts import profits_minus_losses_tax, profits_tax

YEAR = 2020


def notes_of(*amounts, year=YEAR):
    notes = MoneyNotes(max(len(amounts), 1))
    for amount in amounts:
        notes.insert(amount, Date(year=year, month=1, day=1))
    return notes


def test_profits_tax_uses_six_percent():
    assert profits_tax(notes_of(60000, 40000), YEAR) == 6000


def test_profits_tax_for_year_without_records_is_zero():
    assert profits_tax(notes_of(100000), YEAR + 1) == 0


def test_profits_tax_at_least_minimum():
    profits = notes_of(100000)
    equal_losses = notes_of(100000)
    minimum = profits_minus_losses_tax(profits, equal_losses, YEAR)
    assert profits_tax(profits, YEAR) >= minimum


def test_minus_losses_without_losses_uses_fifteen_percent():
    assert profits_minus_losses_tax(notes_of(100000), MoneyNotes(0), YEAR) == 15000


def test_minus_losses_falls_back_to_minimum_tax():
    result = profits_minus_losses_tax(notes_of(100000), notes_of(100000), YEAR)
    assert result == 1000


def test_losses_above_profits_give_minimum_tax():
    profits = notes_of(100000)
    equal = profits_minus_losses_tax(profits, notes_of(100000), YEAR)
    larger = profits_minus_losses_tax(profits, notes_of(500000), YEAR)
    assert larger == equal


def test_losses_only_count_in_the_same_year():
    profits = notes_of(100000)
    other_year_losses = notes_of(100000, year=YEAR - 1)
    assert profits_minus_losses_tax(profits, other_year_losses, YEAR) == (
        profits_minus_losses_tax(profits, MoneyNotes(0), YEAR)
    )


def test_more_losses_never_raise_the_tax():
    profits = notes_of(200000)
    taxes = [
        profits_minus_losses_tax(profits, notes_of(loss), YEAR)
        for loss in (0, 50000, 100000, 150000)
    ]
    assert taxes == sorted(taxes, reverse=True)