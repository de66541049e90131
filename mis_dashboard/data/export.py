"""
CSV export of report tables, in the same dialect the parser reads.
"""

from __future__ import annotations

import csv
from typing import Iterable, Optional, Sequence

import pandas as pd

from mis_dashboard.data.schema import EmployeeRecord

NON_PARTICIPANT_HEADERS = ["SL.No.", "Employee Code", "Employee Name", "Division", "Designation"]


def _header_cell(name: str) -> str:
    # captions taken from a sheet may carry the delimiter or quotes
    if "," in name or '"' in name:
        return '"' + name.replace('"', '""') + '"'
    return name


def to_delimited(header: Sequence[str], rows: Iterable[Sequence[Optional[object]]]) -> str:
    """Header line (quoted only where needed), then every value double-quoted with embedded quotes doubled."""
    frame = pd.DataFrame(
        [["" if value is None else str(value) for value in row] for row in rows],
        columns=list(header),
        dtype=object,
    )
    lines = [",".join(_header_cell(name) for name in header)]
    if not frame.empty:
        body = frame.to_csv(
            index=False,
            header=False,
            quoting=csv.QUOTE_ALL,
            lineterminator="\n",
        )
        lines.append(body.rstrip("\n"))
    return "\n".join(lines)


def non_participants_csv(employees: Sequence[EmployeeRecord]) -> str:
    rows = [
        (index, employee.code, employee.name, employee.division, employee.designation)
        for index, employee in enumerate(employees, start=1)
    ]
    return to_delimited(NON_PARTICIPANT_HEADERS, rows)
