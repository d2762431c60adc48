# taxcalc

`taxcalc` keeps a history of dated money amounts. It works out yearly totals
and statistics from that history. It also computes the simplified taxation
system (STS) tax for a year from those totals.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Money records

`taxcalc.money.MoneyNotes` is a container with a fixed capacity. Each record
pairs an amount with a `Date`. An amount is an integer from 0 to 2**64 - 1.
A `Date` has a `year` from 0 to 65535, and a `month` and `day` from 0 to 255.
Dates order by year, then month, then day.

```python
from taxcalc.money import Date, MoneyNotes, load_template

notes = MoneyNotes(4)
notes.insert(1000, Date(day=1, month=3, year=2023))
notes.insert(2500, Date(day=15, month=7, year=2023))
notes.insert(700, Date(day=2, month=1, year=2024))

print(notes.capacity)        # 4
print(len(notes))            # 3
print(notes.year_sum(2023))  # 3500
for amount, date in notes:
    print(amount, date)
```

`insert` raises `MoneyNotesError` if the container is already full, or if the
amount or the date is not valid.

Capacity can be changed in two ways:

- `resize(new_capacity)` sets the capacity directly. The new capacity may not
  be smaller than the number of records already stored.
- `insert_batch(entries)` appends an iterable of `(amount, date)` pairs. If
  they do not fit, the capacity is doubled until they do. An empty batch is
  an error.

### Queries

Several queries expect the records to be in date order. `sort_by_date()`
sorts them in place, and records with equal dates keep their order.

- `year_sum(year)` adds up every record from the first record dated in `year`
  to the last one. It returns 0 if no record is dated in that year.
- `first_n(n)` returns a new container holding at most the first `n` records.
- `filter_by_year(year)` returns a new container holding that year's records.
  The records must be sorted.
- `filter_transactions(min_amount, max_amount)` returns a new container
  holding the records whose amount lies in the inclusive range.
- `max_sum(year)` returns the largest amount in a year.
- `average_sum(year)` returns the integer mean of the amounts in a year.
- `find_max_transaction()` returns a `MaxTransaction` with the `amount`,
  `index` and `date` of the first record that has the largest amount. An empty
  container gives amount 0 at index 0, dated year 0, month 0, day 0.
- `year_stats()` returns a dict that maps each year from the earliest to the
  latest to a `YearStats` with `total`, `min`, `max` and `count`. A year with
  no records gets all zeros. An empty container gives `{}`.

`filter_by_year`, `max_sum` and `average_sum` raise `RecordNotFoundError` when
the year has no records. `RecordNotFoundError` is a subclass of
`MoneyNotesError`, and `MoneyNotesError` is a subclass of `ValueError`.

`load_template(notes)` fills the free capacity of a container with the sample
record 1000, dated 1 January 2000.

## STS taxes

```python
from taxcalc import sts

tax = sts.profits_tax(notes, 2023)
tax_net = sts.profits_minus_losses_tax(notes, losses, 2023)
```

- `profits_tax(profits, year)` charges 6% on the year's income. The result is
  never less than the minimum tax of 1% of income.
- `profits_minus_losses_tax(profits, losses, year)` charges 15% on income
  minus losses. If losses are larger than income, that base is zero. The
  result is never less than the minimum tax of 1% of income.

The rates are exact fractions. Each result is truncated to a whole number.

## What it does not do

`taxcalc` is a library only. It has no command-line tool, and it does not
read or save records from files or databases. Records are added in code, or
filled in with the sample record by `load_template`. The STS tax is the only
tax regime it computes.