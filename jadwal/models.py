"""Core data types: doctors, shifts and the 30-day schedule."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

MAX_DOCTORS = 20
MAX_DAYS = 30
DAYS_PER_WEEK = 7


class ShiftName(str, Enum):
    """The three daily shifts, in the order they are filled."""

    PAGI = "Pagi"
    SIANG = "Siang"
    MALAM = "Malam"

    def __str__(self) -> str:
        return self.value


@dataclass
class Doctor:
    """A doctor with a weekly shift limit and a preferred shift."""

    name: str
    max_shift: int
    preference: ShiftName
    shifts_used: int = 0
    violations: int = 0

    def reset_stats(self) -> None:
        """Forget the counters collected by the last scheduling run."""
        self.shifts_used = 0
        self.violations = 0


@dataclass
class DaySchedule:
    """The doctors assigned to each shift of one day."""

    shifts: dict[ShiftName, list[str]] = field(
        default_factory=lambda: {shift: [] for shift in ShiftName}
    )

    def doctors_on(self, shift: ShiftName) -> list[str]:
        """Names of the doctors on ``shift``, in assignment order."""
        return list(self.shifts[ShiftName(shift)])

    def assign(self, shift: ShiftName, doctor: Doctor) -> None:
        """Put ``doctor`` on ``shift``; a doctor can appear only once per shift."""
        names = self.shifts[ShiftName(shift)]
        if doctor.name in names:
            raise ValueError(f"{doctor.name!r} is already on shift {shift}")
        names.append(doctor.name)


@dataclass
class Schedule:
    """A schedule of ``MAX_DAYS`` days, numbered from 1."""

    days: list[DaySchedule] = field(
        default_factory=lambda: [DaySchedule() for _ in range(MAX_DAYS)]
    )

    def day(self, number: int) -> DaySchedule:
        """The schedule of day ``number`` (1-based)."""
        if not 1 <= number <= len(self.days):
            raise IndexError(f"day {number} is outside 1..{len(self.days)}")
        return self.days[number - 1]

    def days_between(self, start_day: int, end_day: int) -> Iterator[tuple[int, DaySchedule]]:
        """Yield ``(number, day)`` for the days in ``start_day..end_day`` that exist."""
        first = max(start_day, 1)
        last = min(end_day, len(self.days))
        for number in range(first, last + 1):
            yield number, self.days[number - 1]