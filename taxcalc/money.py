"""Dated money records and the yearly aggregates built on them."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from typing import Iterable, Iterator

MONEY_MAX = 2**64 - 1
"""Largest amount a single record can hold (unsigned 64-bit)."""

_DAY_MONTH_MAX = 2**8 - 1
_YEAR_MAX = 2**16 - 1

TEMPLATE_MONEY = 1000
"""Amount written by :func:`load_template`."""


class MoneyNotesError(ValueError):
    """Raised for invalid arguments or an overfilled record collection."""


class RecordNotFoundError(MoneyNotesError, LookupError):
    """Raised when no record matches the requested year."""


@dataclass(frozen=True, order=True)
class Date:
    """A calendar date; instances order by year, then month, then day."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        for name, value, limit in (
            ("year", self.year, _YEAR_MAX),
            ("month", self.month, _DAY_MONTH_MAX),
            ("day", self.day, _DAY_MONTH_MAX),
        ):
            if isinstance(value, bool) or not isinstance(value, int):
                raise MoneyNotesError(f"{name} must be an integer, got {value!r}")
            if not 0 <= value <= limit:
                raise MoneyNotesError(f"{name} {value} is out of range 0..{limit}")


TEMPLATE_DATE = Date(year=2000, month=1, day=1)
"""Date written by :func:`load_template`."""


@dataclass(frozen=True)
class YearStats:
    """Aggregates of the records that fall in one year."""

    total: int
    min: int
    max: int
    count: int


@dataclass(frozen=True)
class MaxTransaction:
    """The largest record: its amount, position and date."""

    amount: int
    index: int
    date: Date


def _check_money(money: int) -> int:
    if isinstance(money, bool) or not isinstance(money, int):
        raise MoneyNotesError(f"amount must be an integer, got {money!r}")
    if not 0 <= money <= MONEY_MAX:
        raise MoneyNotesError(f"amount {money} is out of range 0..{MONEY_MAX}")
    return money


class MoneyNotes:
    """A bounded, ordered collection of (amount, date) records."""

    def __init__(self, capacity: int) -> None:
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0:
            raise MoneyNotesError(f"capacity must be a non-negative integer, got {capacity!r}")
        self._capacity = capacity
        self._money: list[int] = []
        self._dates: list[Date] = []

    @classmethod
    def _from_records(cls, capacity: int, money: list[int], dates: list[Date]) -> MoneyNotes:
        notes = cls(capacity)
        notes._money = list(money)
        notes._dates = list(dates)
        return notes

    def __len__(self) -> int:
        return len(self._money)

    def __iter__(self) -> Iterator[tuple[int, Date]]:
        return iter(zip(self._money, self._dates))

    def __repr__(self) -> str:
        return f"MoneyNotes(capacity={self._capacity}, records={list(self)!r})"

    @property
    def capacity(self) -> int:
        """Number of records the collection can hold."""
        return self._capacity

    def insert(self, money: int, date: Date) -> None:
        """Append one record; the collection must have room for it."""
        _check_money(money)
        if not isinstance(date, Date):
            raise MoneyNotesError(f"date must be a Date, got {date!r}")
        if len(self._money) >= self._capacity:
            raise MoneyNotesError(f"collection is full (capacity {self._capacity})")
        self._money.append(money)
        self._dates.append(date)

    def insert_batch(self, entries: Iterable[tuple[int, Date]]) -> None:
        """Append many records, doubling the capacity until they fit."""
        batch = list(entries)
        if not batch:
            raise MoneyNotesError("batch must not be empty")
        for money, date in batch:
            _check_money(money)
            if not isinstance(date, Date):
                raise MoneyNotesError(f"date must be a Date, got {date!r}")
        needed = len(self._money) + len(batch)
        if needed > self._capacity:
            new_capacity = max(self._capacity, 1) * 2
            while new_capacity < needed:
                new_capacity *= 2
            self.resize(new_capacity)
        for money, date in batch:
            self._money.append(money)
            self._dates.append(date)

    def resize(self, new_capacity: int) -> None:
        """Change the capacity; it may not drop below the current length."""
        if isinstance(new_capacity, bool) or not isinstance(new_capacity, int):
            raise MoneyNotesError(f"capacity must be an integer, got {new_capacity!r}")
        if new_capacity < len(self._money):
            raise MoneyNotesError(
                f"capacity {new_capacity} is smaller than the {len(self._money)} stored records"
            )
        self._capacity = new_capacity

    def year_sum(self, year: int) -> int:
        """Sum every record from the first to the last one dated in ``year``.

        Records are expected to be grouped by year; the whole span between
        the first and last match is summed. Returns 0 when nothing matches.
        """
        years = [date.year for date in self._dates]
        try:
            first = years.index(year)
        except ValueError:
            return 0
        last = len(years) - 1 - years[::-1].index(year)
        return sum(self._money[first : last + 1])

    def first_n(self, n: int) -> MoneyNotes:
        """Return a new collection holding at most the first ``n`` records."""
        if isinstance(n, bool) or not isinstance(n, int) or n < 0:
            raise MoneyNotesError(f"n must be a non-negative integer, got {n!r}")
        count = min(n, len(self._money))
        return self._from_records(count, self._money[:count], self._dates[:count])

    def filter_by_year(self, year: int) -> MoneyNotes:
        """Return the records of ``year``; records must be sorted by date."""
        first = bisect_left(self._dates, year, key=lambda date: date.year)
        last = bisect_right(self._dates, year, key=lambda date: date.year)
        if first >= last:
            raise RecordNotFoundError(f"no records for year {year}")
        return self._from_records(last - first, self._money[first:last], self._dates[first:last])

    def filter_transactions(self, min_amount: int, max_amount: int) -> MoneyNotes:
        """Return the records whose amount lies in ``[min_amount, max_amount]``."""
        kept = [(m, d) for m, d in self if min_amount <= m <= max_amount]
        return self._from_records(
            len(self._money), [m for m, _ in kept], [d for _, d in kept]
        )

    def sort_by_date(self) -> None:
        """Sort the records by date in place, keeping equal dates in order."""
        ordered = sorted(self, key=lambda record: record[1])
        self._money = [m for m, _ in ordered]
        self._dates = [d for _, d in ordered]

    def _amounts_in(self, year: int) -> list[int]:
        return [m for m, d in self if d.year == year]

    def max_sum(self, year: int) -> int:
        """Return the largest single amount recorded in ``year``."""
        amounts = self._amounts_in(year)
        if not amounts:
            raise RecordNotFoundError(f"no records for year {year}")
        return max(amounts)

    def average_sum(self, year: int) -> int:
        """Return the integer mean of the amounts recorded in ``year``."""
        amounts = self._amounts_in(year)
        if not amounts:
            raise RecordNotFoundError(f"no records for year {year}")
        return sum(amounts) // len(amounts)

    def find_max_transaction(self) -> MaxTransaction:
        """Return the first record with the largest amount.

        An empty collection yields a zero amount at index 0 dated 0/0/0.
        """
        if not self._money:
            return MaxTransaction(amount=0, index=0, date=Date(year=0, month=0, day=0))
        index = max(range(len(self._money)), key=self._money.__getitem__)
        return MaxTransaction(amount=self._money[index], index=index, date=self._dates[index])

    def year_stats(self) -> dict[int, YearStats]:
        """Return statistics for every year from the earliest to the latest.

        Years without records are included with all fields set to zero.
        """
        if not self._money:
            return {}
        grouped: dict[int, list[int]] = {}
        for money, date in self:
            grouped.setdefault(date.year, []).append(money)
        years = range(min(grouped), max(grouped) + 1)
        stats = {}
        for year in years:
            amounts = grouped.get(year)
            if amounts:
                stats[year] = YearStats(sum(amounts), min(amounts), max(amounts), len(amounts))
            else:
                stats[year] = YearStats(0, 0, 0, 0)
        return stats


def load_template(notes: MoneyNotes) -> None:
    """Fill the free capacity of ``notes`` with template records."""
    for _ in range(notes.capacity - len(notes)):
        notes.insert(TEMPLATE_MONEY, TEMPLATE_DATE)