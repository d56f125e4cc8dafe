"""The doctor roster and its CSV file."""

from __future__ import annotations

import re
import warnings
from collections.abc import Iterable, Iterator
from os import PathLike

from .models import MAX_DOCTORS, Doctor, ShiftName

CSV_HEADER = "Nama,Max Shift/Minggu,Preferensi Shift"
_C_WHITESPACE = " \t\n\v\f\r"
_LEADING_INT = re.compile(r"[ \t\n\v\f\r]*([+-]?\d+)")


class RosterError(ValueError):
    """Raised when a roster change is rejected."""


class RosterWarning(UserWarning):
    """Emitted when a roster file holds a value that had to be replaced."""


def _trim(text: str) -> str:
    return text.strip(_C_WHITESPACE)


def _leading_int(text: str) -> int | None:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else None


def normalize_preference(text: str) -> ShiftName:
    """Turn user input such as ``" siang "`` into a shift name."""
    cleaned = _trim(text)
    cleaned = cleaned[:1].upper() + cleaned[1:].lower()
    try:
        return ShiftName(cleaned)
    except ValueError:
        raise RosterError(
            "Preferensi shift tidak valid. Pilih Pagi, Siang, atau Malam."
        ) from None


def parse_max_shift(text: str) -> int:
    """Read a positive weekly shift limit from the start of ``text``."""
    value = _leading_int(text)
    if value is None or value <= 0:
        raise RosterError("Maksimal shift tidak valid. Harus angka positif.")
    return value


class DoctorRoster:
    """The registered doctors, at most ``MAX_DOCTORS`` of them."""

    def __init__(self, doctors: Iterable[Doctor] = ()) -> None:
        self._doctors: list[Doctor] = list(doctors)
        if len(self._doctors) > MAX_DOCTORS:
            raise RosterError(f"Batas maksimum dokter ({MAX_DOCTORS}) telah tercapai.")

    def __len__(self) -> int:
        return len(self._doctors)

    def __iter__(self) -> Iterator[Doctor]:
        return iter(self._doctors)

    def find(self, name: str) -> Doctor | None:
        """The doctor called exactly ``name``, or None."""
        return next((doc for doc in self._doctors if doc.name == name), None)

    def add(self, name: str, max_shift: int, preference: ShiftName | str) -> Doctor:
        """Register a new doctor and return it."""
        if len(self._doctors) >= MAX_DOCTORS:
            raise RosterError(f"Batas maksimum dokter ({MAX_DOCTORS}) telah tercapai.")
        name = _trim(name)
        if not name:
            raise RosterError("Nama dokter tidak boleh kosong.")
        if self.find(name) is not None:
            raise RosterError(f"Dokter dengan nama '{name}' sudah ada.")
        if max_shift <= 0:
            raise RosterError("Maksimal shift tidak valid. Harus angka positif.")
        doctor = Doctor(name, max_shift, normalize_preference(str(preference)))
        self._doctors.append(doctor)
        return doctor

    def remove(self, name: str) -> Doctor:
        """Remove the doctor called ``name`` and return it."""
        name = _trim(name)
        doctor = self.find(name)
        if doctor is None:
            raise RosterError(f"Dokter '{name}' tidak ditemukan.")
        self._doctors.remove(doctor)
        return doctor

    def save(self, path: str | PathLike[str]) -> None:
        """Write the roster as CSV."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(CSV_HEADER + "\n")
            for doc in self._doctors:
                handle.write(f"{doc.name},{doc.max_shift},{doc.preference.value}\n")


def load_doctors(path: str | PathLike[str]) -> DoctorRoster:
    """Read a roster CSV; a missing file raises FileNotFoundError.

    Rows with fewer than three fields are skipped, an unknown preference
    becomes ``Pagi`` with a ``RosterWarning``, and reading stops once
    ``MAX_DOCTORS`` doctors are loaded.
    """
    doctors: list[Doctor] = []
    with open(path, encoding="utf-8") as handle:
        for number, line in enumerate(handle):
            if number == 0 or len(line) < 3:
                continue
            fields = [part for part in line.rstrip("\n").split(",") if part]
            if len(fields) < 3:
                continue
            name = _trim(fields[0])
            max_shift = _leading_int(fields[1]) or 0
            raw_pref = _trim(fields[2])
            try:
                preference = ShiftName(raw_pref)
            except ValueError:
                warnings.warn(
                    f"Preferensi '{raw_pref}' untuk dokter '{name}' tidak valid. "
                    "Default ke 'Pagi'.",
                    RosterWarning,
                    stacklevel=2,
                )
                preference = ShiftName.PAGI
            doctors.append(Doctor(name, max_shift, preference))
            if len(doctors) >= MAX_DOCTORS:
                break
    return DoctorRoster(doctors)


def render_doctor_table(doctors: Iterable[Doctor]) -> str:
    """The doctors as a text table."""
    doctors = list(doctors)
    if not doctors:
        return "Tidak ada dokter yang terdaftar."
    border = "+----+--------------------------------+-----------------+---------------+"
    lines = [
        border,
        "| No | Nama Dokter                    | Max Shift/Minggu| Preferensi    |",
        border,
    ]
    lines.extend(
        f"| {index:<2d} | {doc.name:<30s} | {doc.max_shift:<15d} | {doc.preference.value:<13s} |"
        for index, doc in enumerate(doctors, start=1)
    )
    lines.append(border)
    return "\n".join(lines)