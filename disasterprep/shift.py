"""Work shifts on a day of the week, with an hour range and a value."""

from __future__ import annotations

import dataclasses
import enum


class Day(enum.IntEnum):
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    def __str__(self) -> str:
        return self.name.capitalize()


@dataclasses.dataclass(frozen=True, order=True)
class Shift:
    """A shift; ordered by day, start hour, end hour, then value."""

    day: Day
    start_hour: int
    end_hour: int
    value: int

    def __post_init__(self) -> None:
        if self.start_hour > self.end_hour:
            raise ValueError("Shift ends before it starts?")

    def overlaps_with(self, other: Shift) -> bool:
        """Whether the two shifts share any hour on the same day."""
        return self.day == other.day and (
            self.start_hour <= other.start_hour < self.end_hour
            or other.start_hour <= self.start_hour < other.end_hour
        )

    def length(self) -> int:
        """Number of hours the shift lasts."""
        return self.end_hour - self.start_hour

    def profit(self) -> int:
        """Value earned by working the shift."""
        return self.value

    def __str__(self) -> str:
        return (
            f"{{ {self.day}, {self.start_hour:02d}:00 - {self.end_hour:02d}:00,"
            f" value ${self.value} }}"
        )