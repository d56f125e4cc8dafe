import pytest

from jadwal.doctors import (
    CSV_HEADER,
    DoctorRoster,
    RosterError,
    RosterWarning,
    load_doctors,
    normalize_preference,
    parse_max_shift,
    render_doctor_table,
)
from jadwal.models import MAX_DOCTORS, Doctor, ShiftName


@pytest.mark.parametrize("text,expected", [("5", 5), (" 7abc", 7), ("12\n", 12)])
def test_parse_max_shift_valid(text, expected):
    assert parse_max_shift(text) == expected


@pytest.mark.parametrize("text", ["0", "-3", "x", ""])
def test_parse_max_shift_invalid(text):
    with pytest.raises(RosterError):
        parse_max_shift(text)


@pytest.mark.parametrize(
    "text,expected",
    [("  pAGi ", ShiftName.PAGI), ("siang\n", ShiftName.SIANG), ("MALAM", ShiftName.MALAM)],
)
def test_normalize_preference(text, expected):
    assert normalize_preference(text) is expected


@pytest.mark.parametrize("text", ["Sore", "", "pagi2"])
def test_normalize_preference_invalid(text):
    with pytest.raises(RosterError):
        normalize_preference(text)


def test_add_and_find():
    roster = DoctorRoster()
    doc = roster.add("  Ana  ", 4, "siang")
    assert doc.name == "Ana"
    assert doc.preference is ShiftName.SIANG
    assert roster.find("Ana") is doc
    assert roster.find("Budi") is None
    assert len(roster) == 1


def test_add_rejects_duplicate_and_empty():
    roster = DoctorRoster()
    roster.add("Ana", 4, ShiftName.PAGI)
    with pytest.raises(RosterError):
        roster.add("Ana", 2, ShiftName.MALAM)
    with pytest.raises(RosterError):
        roster.add("   ", 2, ShiftName.MALAM)
    with pytest.raises(RosterError):
        roster.add("Budi", 0, ShiftName.MALAM)
    assert [d.name for d in roster] == ["Ana"]


def test_add_rejects_when_full():
    roster = DoctorRoster(Doctor(f"D{i}", 1, ShiftName.PAGI) for i in range(MAX_DOCTORS))
    with pytest.raises(RosterError):
        roster.add("Extra", 1, ShiftName.PAGI)
    assert len(roster) == MAX_DOCTORS


def test_remove():
    roster = DoctorRoster()
    roster.add("Ana", 4, ShiftName.PAGI)
    roster.add("Budi", 4, ShiftName.MALAM)
    removed = roster.remove(" Ana ")
    assert removed.name == "Ana"
    assert [d.name for d in roster] == ["Budi"]
    with pytest.raises(RosterError):
        roster.remove("Ana")


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "daftar_dokter.csv"
    roster = DoctorRoster()
    roster.add("Ana", 4, ShiftName.PAGI)
    roster.add("Budi Santoso", 6, ShiftName.MALAM)
    roster.save(path)
    assert path.read_text(encoding="utf-8").splitlines()[0] == CSV_HEADER
    loaded = load_doctors(path)
    assert [(d.name, d.max_shift, d.preference) for d in loaded] == [
        (d.name, d.max_shift, d.preference) for d in roster
    ]


def test_load_invalid_preference_defaults_to_pagi(tmp_path):
    path = tmp_path / "d.csv"
    path.write_text(CSV_HEADER + "\nAna,3,Sore\n", encoding="utf-8")
    with pytest.warns(RosterWarning):
        roster = load_doctors(path)
    assert roster.find("Ana").preference is ShiftName.PAGI


def test_load_skips_short_and_incomplete_rows(tmp_path):
    path = tmp_path / "d.csv"
    path.write_text(
        CSV_HEADER + "\n\nx\nOnly,2\n Ana ,,3, Malam \n", encoding="utf-8"
    )
    roster = load_doctors(path)
    assert [(d.name, d.max_shift, d.preference) for d in roster] == [
        ("Ana", 3, ShiftName.MALAM)
    ]


def test_load_stops_at_limit(tmp_path):
    path = tmp_path / "d.csv"
    rows = "".join(f"D{i},2,Pagi\n" for i in range(MAX_DOCTORS + 5))
    path.write_text(CSV_HEADER + "\n" + rows, encoding="utf-8")
    assert len(load_doctors(path)) == MAX_DOCTORS


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_doctors(tmp_path / "absent.csv")


def test_render_doctor_table():
    doctors = [Doctor("Ana", 4, ShiftName.PAGI), Doctor("Budi", 6, ShiftName.MALAM)]
    table = render_doctor_table(doctors).splitlines()
    assert len(table) == 4 + len(doctors)
    assert table[3].startswith("| 1  | Ana ")
    assert "Malam" in table[4]
    assert len({len(line) for line in table}) == 1


def test_render_empty_table():
    assert render_doctor_table([]) == "Tidak ada dokter yang terdaftar."