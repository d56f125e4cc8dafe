"""Interactive menu for managing doctors and their schedule."""

from __future__ import annotations

import argparse
import os
import re
import subprocess
import sys
import warnings
from pathlib import Path
from typing import TextIO

from .doctors import (
    DoctorRoster,
    RosterError,
    load_doctors,
    normalize_preference,
    parse_max_shift,
    render_doctor_table,
)
from .generator import SchedulingError, generate_schedule
from .models import MAX_DAYS, MAX_DOCTORS, Schedule
from .report import render_schedule, render_summary, week_range, write_schedule_csv

_RULE = "=============================================="
_MAIN_MENU = (
    _RULE,
    "|       APLIKASI PENJADWALAN DOKTER          |",
    _RULE,
    "| 1. Manajemen Dokter                        |",
    "| 2. Manajemen Jadwal                        |",
    "| 3. Keluar                                  |",
    _RULE,
)
_DOCTOR_MENU = (
    _RULE,
    "|           MENU MANAJEMEN DOKTER            |",
    _RULE,
    "| 1. Tampilkan Daftar Dokter                 |",
    "| 2. Tambah Dokter Baru                      |",
    "| 3. Hapus Dokter                            |",
    "| 4. Kembali ke Menu Utama                   |",
    _RULE,
)
_SCHEDULE_MENU = (
    _RULE,
    "|           MENU MANAJEMEN JADWAL            |",
    _RULE,
    "| 1. Buat Jadwal Otomatis (30 Hari)          |",
    "| 2. Tampilkan Jadwal                        |",
    "| 3. Tampilkan Ringkasan Shift Dokter        |",
    "| 4. Simpan Jadwal ke CSV                    |",
    "| 5. Kembali ke Menu Utama                   |",
    _RULE,
)
_VIEW_MENU = (
    _RULE,
    "|           MENU TAMPILAN JADWAL             |",
    _RULE,
    "| 1. Tampilkan Jadwal Bulanan (30 Hari)      |",
    "| 2. Tampilkan Jadwal Per Minggu             |",
    "| 3. Tampilkan Jadwal Harian                 |",
    "| 4. Kembali ke Menu Manajemen Jadwal        |",
    _RULE,
)
_PROMPT = "Masukkan pilihan Anda: "
_INVALID_CHOICE = "Pilihan tidak valid. Silakan coba lagi."
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_SHORT_INPUT = 9
_NAME_INPUT = 49


def _parse_choice(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else -1


class App:
    """The interactive application, reading from ``stdin`` and writing to ``stdout``."""

    def __init__(
        self,
        roster_path: str | os.PathLike[str] = "daftar_dokter.csv",
        schedule_path: str | os.PathLike[str] = "jadwal.csv",
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.roster_path = Path(roster_path)
        self.schedule_path = Path(schedule_path)
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.roster = DoctorRoster()
        self.schedule: Schedule | None = None

    # --- terminal helpers -------------------------------------------------

    def _print(self, text: str = "") -> None:
        self.stdout.write(text + "\n")

    def _clear(self) -> None:
        isatty = getattr(self.stdout, "isatty", None)
        if not (isatty and isatty()):
            return
        command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
        try:
            subprocess.run(command, check=False)
        except OSError:
            pass

    def _ask(self, prompt: str, limit: int = _SHORT_INPUT) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")[:limit]

    def _pause(self) -> None:
        self.stdout.write("\nTekan ENTER untuk melanjutkan...")
        self.stdout.flush()
        self.stdin.readline()

    def _menu_choice(self, menu: tuple[str, ...]) -> int:
        self._clear()
        for line in menu:
            self._print(line)
        return _parse_choice(self._ask(_PROMPT))

    # --- roster -----------------------------------------------------------

    def _load_roster(self) -> None:
        if not self.roster_path.exists():
            self._print(
                f"File {self.roster_path.name} tidak ditemukan. "
                "Akan membuat file baru jika ada data ditambahkan."
            )
            return
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            self.roster = load_doctors(self.roster_path)
        for warning in caught:
            self._print(f"Peringatan: {warning.message}")
        if len(self.roster) >= MAX_DOCTORS:
            self._print(f"Batas maksimum dokter ({MAX_DOCTORS}) tercapai.")
        self._print(f"Data dokter berhasil dimuat. Total: {len(self.roster)} dokter.")
        self._pause()

    def _save_roster(self) -> None:
        try:
            self.roster.save(self.roster_path)
        except OSError:
            self._print(f"Gagal menulis ke file {self.roster_path.name}")
        else:
            self._print(f"Data dokter berhasil disimpan ke {self.roster_path.name}.")
        self._pause()

    def _show_doctors(self) -> None:
        self._clear()
        self._print("--- Daftar Dokter ---")
        self._print(render_doctor_table(self.roster))
        self._pause()

    def _add_doctor(self) -> None:
        self._clear()
        self._print("--- Tambah Dokter Baru ---")
        if len(self.roster) >= MAX_DOCTORS:
            self._print(f"Batas maksimum dokter ({MAX_DOCTORS}) telah tercapai.")
            self._pause()
            return
        name = self._ask("Masukkan Nama Dokter: ", _NAME_INPUT).strip()
        try:
            if not name:
                raise RosterError("Nama dokter tidak boleh kosong.")
            if self.roster.find(name) is not None:
                raise RosterError(f"Dokter dengan nama '{name}' sudah ada.")
            max_shift = parse_max_shift(self._ask("Masukkan Maksimal Shift per Minggu : "))
            preference = normalize_preference(
                self._ask("Masukkan Preferensi Shift (Pagi/Siang/Malam): ")
            )
            doctor = self.roster.add(name, max_shift, preference)
        except RosterError as error:
            self._print(str(error))
            self._pause()
            return
        self._print(f"Dokter '{doctor.name}' berhasil ditambahkan.")
        self._save_roster()

    def _remove_doctor(self) -> None:
        self._clear()
        self._print("--- Hapus Dokter ---")
        if not len(self.roster):
            self._print("Belum ada data dokter.")
            self._pause()
            return
        self._show_doctors()
        name = self._ask("\nMasukkan Nama Dokter yang akan dihapus: ", _NAME_INPUT).strip()
        try:
            self.roster.remove(name)
        except RosterError as error:
            self._print(str(error))
            self._pause()
            return
        self._print(f"Dokter '{name}' berhasil dihapus.")
        self._save_roster()

    # --- schedule ---------------------------------------------------------

    def _generate(self) -> None:
        self._clear()
        self._print("--- Membuat Jadwal Otomatis ---")
        try:
            self.schedule = generate_schedule(self.roster)
        except SchedulingError as error:
            if error.failures:
                for message in error.messages:
                    self._print(message)
                self._print("\nMohon tambah dokter atau sesuaikan batas shift.")
                self.schedule = None
            else:
                self._print(str(error))
        else:
            self._print(f"Jadwal {MAX_DAYS} hari berhasil dibuat.")
        self._pause()

    def _summary(self) -> None:
        self._clear()
        self._print("--- Ringkasan Shift Dokter ---")
        if not len(self.roster):
            self._print("Tidak ada dokter terdaftar.")
        elif self.schedule is None:
            self._print("Jadwal belum dibuat.")
        else:
            self._print(render_summary(self.roster))
        self._pause()

    def _save_schedule(self) -> None:
        self._clear()
        self._print("--- Menyimpan Jadwal ke CSV ---")
        if self.schedule is None:
            self._print("Jadwal belum dibuat.")
        else:
            try:
                write_schedule_csv(self.schedule, self.schedule_path)
            except OSError:
                self._print(f"Gagal membuat file {self.schedule_path.name}")
            else:
                self._print(f"Jadwal berhasil disimpan ke {self.schedule_path.name}.")
        self._pause()

    def _show_range(self, title: str, start_day: int, end_day: int) -> None:
        self._clear()
        self._print(title)
        text = render_schedule(self.schedule, start_day, end_day)
        self._print(text if self.schedule is None else text + "\n")
        self._pause()

    # --- menus ------------------------------------------------------------

    def run(self) -> None:
        """Load the roster and run the main menu until the user quits."""
        try:
            self._load_roster()
            while True:
                choice = self._menu_choice(_MAIN_MENU)
                if choice == 1:
                    self.doctor_menu()
                elif choice == 2:
                    self.schedule_menu()
                elif choice == 3:
                    self._print("Terima kasih telah menggunakan aplikasi penjadwalan dokter.")
                    return
                else:
                    self._print(_INVALID_CHOICE)
                    self._pause()
        except EOFError:
            self._print()

    def doctor_menu(self) -> None:
        """List, add and remove doctors."""
        actions = {1: self._show_doctors, 2: self._add_doctor, 3: self._remove_doctor}
        while (choice := self._menu_choice(_DOCTOR_MENU)) != 4:
            action = actions.get(choice)
            if action is None:
                self._print(_INVALID_CHOICE)
                self._pause()
            else:
                action()

    def schedule_menu(self) -> None:
        """Generate, view, summarise and save the schedule."""
        actions = {
            1: self._generate,
            2: self.view_menu,
            3: self._summary,
            4: self._save_schedule,
        }
        while (choice := self._menu_choice(_SCHEDULE_MENU)) != 5:
            action = actions.get(choice)
            if action is None:
                self._print(_INVALID_CHOICE)
                self._pause()
            else:
                action()

    def view_menu(self) -> None:
        """Show the schedule for the month, a week or a day."""
        while (choice := self._menu_choice(_VIEW_MENU)) != 4:
            if choice == 1:
                self._show_range(
                    f"\n--- Jadwal Dokter Bulanan (Hari 1 - {MAX_DAYS}) ---", 1, MAX_DAYS
                )
            elif choice == 2:
                week = _parse_choice(self._ask("\nMasukkan nomor minggu (1-4): "))
                try:
                    start, end = week_range(week)
                except ValueError as error:
                    self._print(str(error))
                    self._pause()
                    continue
                self._show_range(
                    f"\n--- Jadwal Dokter Minggu {week} (Hari {start} - {end}) ---", start, end
                )
            elif choice == 3:
                day = _parse_choice(self._ask(f"\nMasukkan nomor hari (1-{MAX_DAYS}): "))
                if not 1 <= day <= MAX_DAYS:
                    self._print(f"Input hari tidak valid. Pilih antara 1 sampai {MAX_DAYS}.")
                    self._pause()
                    continue
                self._show_range(f"\n--- Jadwal Dokter Hari {day} ---", day, day)
            else:
                self._print(_INVALID_CHOICE)
                self._pause()


def main(argv: list[str] | None = None) -> int:
    """Start the interactive application."""
    parser = argparse.ArgumentParser(description="Penjadwalan dokter 30 hari.")
    parser.add_argument("--roster", default="daftar_dokter.csv", help="file CSV daftar dokter")
    parser.add_argument("--schedule", default="jadwal.csv", help="file CSV keluaran jadwal")
    args = parser.parse_args(argv)
    App(args.roster, args.schedule).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())