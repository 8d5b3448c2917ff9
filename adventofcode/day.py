"""Valid days of advent and helpers around them."""

from __future__ import annotations

import functools
from collections.abc import Iterator
from datetime import datetime, timedelta, timezone

FIRST_DAY = 1
LAST_DAY = 25
SERVER_UTC_OFFSET_HOURS = -5


class DayFromStrError(ValueError):
    """Raised when text cannot be parsed as a day of advent."""

    def __init__(self) -> None:
        super().__init__("expecting a day number between 1 and 25")


@functools.total_ordering
class Day:
    """A day of advent, an integer from 1 to 25, shown as two digits."""

    __slots__ = ("_value",)

    def __init__(self, value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"day must be an int, not {type(value).__name__}")
        if not FIRST_DAY <= value <= LAST_DAY:
            raise ValueError(
                "invalid day number, expecting a value between 1 and 25"
            )
        self._value = value

    @property
    def value(self) -> int:
        """The day as a plain integer."""
        return self._value

    @classmethod
    def parse(cls, text: str) -> Day:
        """Parse a day number such as ``"7"`` or ``"07"``."""
        digits = text[1:] if text.startswith("+") else text
        if not digits or not (digits.isascii() and digits.isdigit()):
            raise DayFromStrError()
        number = int(digits)
        if not FIRST_DAY <= number <= LAST_DAY:
            raise DayFromStrError()
        return cls(number)

    @classmethod
    def today(cls) -> Day | None:
        """Return today's day if it is between the 1st and 25th of December."""
        offset = timezone(timedelta(hours=SERVER_UTC_OFFSET_HOURS))
        return _advent_day(datetime.now(offset))

    def __int__(self) -> int:
        return self._value

    def __index__(self) -> int:
        return self._value

    def __str__(self) -> str:
        return f"{self._value:02}"

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)

    def __repr__(self) -> str:
        return f"Day({self._value})"

    def __hash__(self) -> int:
        return hash(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Day):
            return self._value == other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Day):
            return self._value < other._value
        if isinstance(other, int) and not isinstance(other, bool):
            return self._value < other
        return NotImplemented


def _advent_day(moment: datetime) -> Day | None:
    if moment.month == 12 and moment.day <= LAST_DAY:
        return Day(moment.day)
    return None


def all_days() -> Iterator[Day]:
    """Yield every day of advent from the 1st to the 25th."""
    for number in range(FIRST_DAY, LAST_DAY + 1):
        yield Day(number)