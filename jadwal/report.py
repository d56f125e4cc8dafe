"""Text and CSV views of a schedule and of the doctors' shift counts."""

from __future__ import annotations

from collections.abc import Iterable
from os import PathLike

from .models import DAYS_PER_WEEK, MAX_DAYS, Doctor, Schedule, ShiftName

SCHEDULE_NOT_CREATED = "Jadwal belum dibuat. Mohon buat jadwal terlebih dahulu."
SCHEDULE_CSV_HEADER = "Hari,Shift Pagi,Shift Siang,Shift Malam"
WEEKS = 4

_SCHEDULE_BORDER = (
    "+------+--------------------------------+--------------------------------"
    "+--------------------------------+"
)
_SCHEDULE_HEADER = (
    "| Hari |              Pagi              |              Siang             "
    "|              Malam             |"
)
_SUMMARY_BORDER = "+--------------------------------+-----------------+-----------------+"
_SUMMARY_HEADER = "| Nama Dokter                    | Total Shift     | Total Pelanggaran |"
_CELL_LIMIT = 34


def _cell(names: list[str], row: int) -> str:
    if row >= len(names):
        return ""
    return f"{row + 1}. {names[row]}"[:_CELL_LIMIT]


def render_schedule(schedule: Schedule | None, start_day: int, end_day: int) -> str:
    """The days ``start_day..end_day`` of ``schedule`` as a text table.

    Days outside the schedule are left out. A missing schedule gives a notice
    instead of a table.
    """
    if schedule is None:
        return SCHEDULE_NOT_CREATED

    lines = [_SCHEDULE_BORDER, _SCHEDULE_HEADER, _SCHEDULE_BORDER]
    for number, day in schedule.days_between(start_day, end_day):
        columns = [day.doctors_on(shift) for shift in ShiftName]
        height = max(1, *(len(column) for column in columns))
        for row in range(height):
            label = f"|  {number:<4d}" if row == 0 else "|      "
            cells = "".join(f"| {_cell(column, row):<30s} " for column in columns)
            lines.append(f"{label}{cells}|")
        lines.append(_SCHEDULE_BORDER)
    return "\n".join(lines)


def render_summary(doctors: Iterable[Doctor]) -> str:
    """Each doctor's shift and violation counts, with the overall violation total."""
    doctors = list(doctors)
    if not doctors:
        return "Tidak ada dokter terdaftar."
    lines = [_SUMMARY_BORDER, _SUMMARY_HEADER, _SUMMARY_BORDER]
    lines.extend(
        f"| {doc.name:<30s} | {doc.shifts_used:<15d} | {doc.violations:<15d} |"
        for doc in doctors
    )
    lines.append(_SUMMARY_BORDER)
    total = sum(doc.violations for doc in doctors)
    lines.append("")
    lines.append(f"Total Pelanggaran Preferensi Keseluruhan: {total}")
    return "\n".join(lines)


def write_schedule_csv(schedule: Schedule, path: str | PathLike[str]) -> None:
    """Write one CSV row per day, the doctors of a shift joined by ``"; "``."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(SCHEDULE_CSV_HEADER + "\n")
        for number, day in enumerate(schedule.days, start=1):
            cells = ["; ".join(day.doctors_on(shift)) for shift in ShiftName]
            handle.write(f"{number},{','.join(cells)}\n")


def week_range(week: int) -> tuple[int, int]:
    """The first and last day number of ``week`` (1 to 4)."""
    if not 1 <= week <= WEEKS:
        raise ValueError(f"Input minggu tidak valid. Pilih antara 1 sampai {WEEKS}.")
    start = (week - 1) * DAYS_PER_WEEK + 1
    end = min(week * DAYS_PER_WEEK, MAX_DAYS)
    return start, end