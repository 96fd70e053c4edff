"""Log of every key pressed, with the stack after each press."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from types import TracebackType
from typing import Optional, Union

from rpnvoyager.calculator import MAX_DIGITS, Calculator

VERSION = "0.9.16"
LOGFILE = "data.log"
_FOOTER = "END LOG FILE"


def header(version: str, when: datetime) -> str:
    """Return the three header lines that open a log."""
    return (
        f"RPNV {version} DATALOG - {when.ctime()}\n"
        "Calc buttons pressed, meaning and stack or calc error, if any\n"
        "BUTTON\tMEAN\tX:\t\t\tY:\t\t\tZ:\t\t\tT:\t\t\tLastX:\n"
    )


def format_entry(position: int, label: str, calc: Calculator) -> str:
    """Return the log line for a key press: key, legend, X, Y, Z, T, last X."""
    values = "\t".join(f"{value: .{MAX_DIGITS}E}" for value in (*calc.stack, calc.last_x))
    return f"{position}\t{label}\t{values}"


class DataLog:
    """A log file opened for writing, closed with a footer line."""

    def __init__(
        self,
        path: Union[str, Path] = LOGFILE,
        when: Optional[datetime] = None,
    ) -> None:
        self.path = Path(path)
        self._file = self.path.open("w", encoding="utf-8")
        self._file.write(header(VERSION, when or datetime.now()))

    @property
    def closed(self) -> bool:
        return self._file.closed

    def record(self, position: int, label: str, calc: Calculator) -> None:
        """Append a line for a key press; position 0 (no key) is skipped."""
        if position == 0:
            return
        self._file.write(format_entry(position, label, calc) + "\n")

    def close(self) -> None:
        """Write the footer and close the file; later calls do nothing."""
        if self._file.closed:
            return
        self._file.write(_FOOTER)
        self._file.close()

    def __enter__(self) -> DataLog:
        return self

    def __exit__(
        self,
        *args: Union[type[BaseException], BaseException, TracebackType, None],
    ) -> None:
        self.close()