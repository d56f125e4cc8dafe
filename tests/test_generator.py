import pytest

from jadwal.generator import SchedulingError, generate_schedule, is_available
from jadwal.models import MAX_DAYS, Doctor, ShiftName


def test_is_available_grows_per_week():
    doc = Doctor("Ana", 2, ShiftName.PAGI, shifts_used=2)
    assert not is_available(doc, 6)
    assert is_available(doc, 7)
    doc.shifts_used = 1
    assert is_available(doc, 0)


def test_generate_with_preferred_doctors():
    doctors = [
        Doctor("Ana", 7, ShiftName.PAGI),
        Doctor("Budi", 7, ShiftName.SIANG),
        Doctor("Citra", 7, ShiftName.MALAM),
    ]
    schedule = generate_schedule(doctors)
    for _, day in schedule.days_between(1, MAX_DAYS):
        assert day.doctors_on(ShiftName.PAGI) == ["Ana"]
        assert day.doctors_on(ShiftName.SIANG) == ["Budi"]
        assert day.doctors_on(ShiftName.MALAM) == ["Citra"]
    assert all(d.violations == 0 for d in doctors)
    assert all(d.shifts_used == MAX_DAYS for d in doctors)


def test_generate_resets_stats_first():
    doctors = [Doctor(n, 7, s, shifts_used=99, violations=9) for n, s in
               zip(["Ana", "Budi", "Citra"], ShiftName)]
    generate_schedule(doctors)
    assert all(d.violations == 0 for d in doctors)
    assert all(d.shifts_used == MAX_DAYS for d in doctors)


def test_violations_match_non_preferred_assignments():
    doctors = [Doctor("Ana", 21, ShiftName.PAGI), Doctor("Budi", 21, ShiftName.PAGI)]
    schedule = generate_schedule(doctors)
    by_name = {d.name: d for d in doctors}
    violations = {d.name: 0 for d in doctors}
    used = {d.name: 0 for d in doctors}
    for _, day in schedule.days_between(1, MAX_DAYS):
        for shift in ShiftName:
            names = day.doctors_on(shift)
            assert names
            for name in names:
                used[name] += 1
                if by_name[name].preference != shift:
                    violations[name] += 1
    assert violations == {d.name: d.violations for d in doctors}
    assert used == {d.name: d.shifts_used for d in doctors}
    assert sum(violations.values()) > 0


def test_no_doctors_raises():
    with pytest.raises(SchedulingError) as info:
        generate_schedule([])
    assert info.value.failures == []


def test_shortage_reports_failures():
    doctors = [Doctor("Ana", 1, ShiftName.PAGI)]
    with pytest.raises(SchedulingError) as info:
        generate_schedule(doctors)
    failures = info.value.failures
    assert (1, ShiftName.SIANG) in failures
    assert (1, ShiftName.MALAM) in failures
    assert (1, ShiftName.PAGI) not in failures
    assert info.value.messages[0].startswith("Gagal: Kekurangan dokter untuk hari 1")
    assert str(info.value) == "\n".join(info.value.messages)