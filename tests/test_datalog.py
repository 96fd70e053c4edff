from datetime import datetime

import pytest

from rpnvoyager.calculator import Calculator
from rpnvoyager.datalog import VERSION, DataLog, format_entry, header

WHEN = datetime(2025, 1, 2, 3, 4, 5)


def _calc():
    calc = Calculator()
    calc.stack = [1.5, -2.0, 0.0, 1.0e20]
    calc.last_x = 3.0
    return calc


def test_header_lines():
    text = header("0.9.16", WHEN)
    lines = text.splitlines()
    assert text.endswith("\n")
    assert len(lines) == 3
    assert lines[0] == f"RPNV 0.9.16 DATALOG - {WHEN.ctime()}"
    assert lines[2].split("\t")[0] == "BUTTON"


def test_header_time_in_asctime_form():
    first = header(VERSION, WHEN).splitlines()[0]
    assert first.endswith("Thu Jan  2 03:04:05 2025")


def test_entry_fields():
    fields = format_entry(7, "7", _calc()).split("\t")
    assert fields[:2] == ["7", "7"]
    assert [float(f) for f in fields[2:]] == [1.5, -2.0, 0.0, 1.0e20, 3.0]
    assert fields[2].startswith(" ")
    assert fields[3].startswith("-")


def test_entry_uses_twelve_places():
    fields = format_entry(1, "x", _calc()).split("\t")
    for field in fields[2:]:
        mantissa = field.split("E")[0]
        assert len(mantissa.split(".")[1]) == 12


def test_log_file_contents(tmp_path):
    path = tmp_path / "data.log"
    calc = _calc()
    with DataLog(path, WHEN) as log:
        log.record(1, "√x", calc)
        log.record(0, "x", calc)
    text = path.read_text(encoding="utf-8")
    assert text.startswith(header(VERSION, WHEN))
    assert format_entry(1, "√x", calc) + "\n" in text
    assert text.endswith("END LOG FILE")
    assert len(text.splitlines()) == 5


def test_close_twice_writes_one_footer(tmp_path):
    path = tmp_path / "data.log"
    log = DataLog(path, WHEN)
    log.close()
    log.close()
    assert log.closed
    assert path.read_text(encoding="utf-8").count("END LOG FILE") == 1


def test_record_after_close_fails(tmp_path):
    log = DataLog(tmp_path / "data.log", WHEN)
    log.close()
    with pytest.raises(ValueError):
        log.record(1, "√x", _calc())