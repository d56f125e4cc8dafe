"""Automatic 30-day schedule generation."""

from __future__ import annotations

from collections.abc import Iterable

from .models import DAYS_PER_WEEK, Doctor, Schedule, ShiftName


class SchedulingError(Exception):
    """Raised when a schedule cannot be built.

    ``failures`` lists the ``(day, shift)`` pairs that no doctor could fill.
    """

    def __init__(self, message: str, failures: Iterable[tuple[int, ShiftName]] = ()) -> None:
        super().__init__(message)
        self.failures = list(failures)

    @property
    def messages(self) -> list[str]:
        """One line per unfilled shift."""
        return [
            f"Gagal: Kekurangan dokter untuk hari {day}, shift {shift.value}."
            for day, shift in self.failures
        ]


def is_available(doctor: Doctor, day_index: int) -> bool:
    """Whether ``doctor`` has shifts left by day ``day_index`` (0-based)."""
    week = day_index // DAYS_PER_WEEK
    return doctor.shifts_used < doctor.max_shift * (week + 1)


def generate_schedule(doctors: Iterable[Doctor]) -> Schedule:
    """Build a schedule, updating each doctor's shift and violation counts.

    Every doctor available and preferring a shift is put on it; a shift left
    empty takes the first available doctor with another preference, which
    counts as a violation. Raises SchedulingError if any shift stays empty.
    """
    doctors = list(doctors)
    if not doctors:
        raise SchedulingError("Tidak ada dokter terdaftar. Mohon tambahkan dokter.")
    for doc in doctors:
        doc.reset_stats()

    schedule = Schedule()
    failures: list[tuple[int, ShiftName]] = []
    for day_index, day in enumerate(schedule.days):
        for shift in ShiftName:
            for doc in doctors:
                if (
                    doc.preference == shift
                    and is_available(doc, day_index)
                    and doc.name not in day.shifts[shift]
                ):
                    day.assign(shift, doc)
                    doc.shifts_used += 1

            if day.shifts[shift]:
                continue
            substitute = next(
                (
                    doc
                    for doc in doctors
                    if doc.preference != shift
                    and is_available(doc, day_index)
                    and doc.name not in day.shifts[shift]
                ),
                None,
            )
            if substitute is None:
                failures.append((day_index + 1, shift))
                continue
            day.assign(shift, substitute)
            substitute.shifts_used += 1
            substitute.violations += 1

    if failures:
        error = SchedulingError("", failures)
        error.args = ("\n".join(error.messages),)
        raise error
    return schedule