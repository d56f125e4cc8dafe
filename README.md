# jadwal

A console application that keeps a roster of doctors and builds a 30-day
shift schedule. Each day has three shifts: Pagi, Siang and Malam.

## Installing

```
pip install .
```

## Running

```
jadwal
```

By default the program reads `daftar_dokter.csv` from the current directory
when it starts. It saves a schedule to `jadwal.csv`. Two options change
these paths:

```
jadwal --roster doctors.csv --schedule out.csv
```

The menus and prompts are in Indonesian:

1. **Manajemen Dokter**: list, add or remove doctors. Every add or remove
   writes the roster file again.
2. **Manajemen Jadwal**: generate the schedule, view it for the whole month,
   for one week (1–4) or for one day, show each doctor's shift and
   preference-violation counts, or save it as CSV.
3. **Keluar**: quit. The program also stops when input reaches end of file.

The screen is cleared between menus only when output goes to a terminal.

### Doctor file

```
Nama,Max Shift/Minggu,Preferensi Shift
Dr. Andi,5,Pagi
Dr. Budi,5,Siang
Dr. Citra,5,Malam
```

The program skips the first line. It also skips rows with fewer than three
fields. A preference other than `Pagi`, `Siang` or `Malam` falls back to
`Pagi` and prints a warning. The roster holds at most 20 doctors.

When you add a doctor by hand, the program checks the entry. The name must
not be empty and must not already be in the roster. The weekly limit must
be a positive number. The preference can be typed in any case, for example
`siang`.

### How the schedule is built

The schedule is filled day by day, and within each day shift by shift in
the order Pagi, Siang, Malam. Every doctor who prefers a shift goes on it,
as long as they are still under their limit. The limit adds up over the
month: a doctor may have worked `max_shift × n` shifts in total by the end
of week *n*. Days 29 and 30 count as a fifth week.

A shift can still be empty after that. Then the first available doctor who
prefers a different shift goes on it, and this counts as a preference
violation for that doctor. If no doctor is available at all, generation
fails, every empty slot is listed, and no schedule is kept.

### Schedule CSV

```
Hari,Shift Pagi,Shift Siang,Shift Malam
1,Dr. Andi,Dr. Budi,Dr. Citra
...
```

When several doctors share a shift, their names are joined with `"; "`.

## Using it as a library

```python
from jadwal.doctors import load_doctors
from jadwal.generator import generate_schedule, SchedulingError
from jadwal.report import render_schedule, render_summary, write_schedule_csv

roster = load_doctors("daftar_dokter.csv")
doctors = list(roster)
try:
    schedule = generate_schedule(doctors)
except SchedulingError as exc:
    print(exc)          # one line per unfilled shift
    print(exc.failures) # [(day, ShiftName), ...]
else:
    print(render_schedule(schedule, 1, 7))
    print(render_summary(doctors))
    write_schedule_csv(schedule, "jadwal.csv")
```

The modules:

- `jadwal.models`
  - `ShiftName`
  - `Doctor`
  - `DaySchedule`
  - `Schedule`
- `jadwal.doctors`
  - `DoctorRoster`, with `add`, `remove`, `find` and `save`
  - `load_doctors`
  - `normalize_preference`
  - `parse_max_shift`
  - `render_doctor_table`
  - `RosterError`
  - `RosterWarning`
- `jadwal.generator`
  - `generate_schedule`
  - `is_available`
  - `SchedulingError`
- `jadwal.report`
  - `render_schedule`
  - `render_summary`
  - `write_schedule_csv`
  - `week_range`
- `jadwal.cli`
  - `App`
  - `main`

## What it does not do

The schedule exists only in memory while the program runs. Saving it to
`jadwal.csv` does not make it available later: the program never reads the
schedule file back. The shift and violation counts are also not kept
between runs.

## Tests

```
pip install .[test]
pytest
```