"""
Fixed positional schemas for the published sheets.

Column offsets live here and nowhere else: each schema binds a parsed row to
a typed record once, at parse time, and the rest of the package reads named
attributes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Sequence, Tuple, TypeVar

R = TypeVar("R")


@dataclass(frozen=True)
class RecordSchema(Generic[R]):
    name: str
    min_fields: int
    factory: Callable[[Sequence[str]], R]

    def bind(self, fields: Sequence[str]) -> R:
        return self.factory(fields)


# --- Contest / MIS sheet -----------------------------------------------------

CONTEST_COLUMNS: Dict[str, int] = {
    "company_name": 1,
    "staff_name": 3,
    "outstanding": 5,
    "foreign_trip_target": 6,
    "fresh_customer_target": 7,
    "domestic_trip_target": 8,
    "fresh_customer_achievement": 11,
    "net_growth": 14,
    "contest_total_net": 17,
}
CONTEST_MIN_FIELDS = max(CONTEST_COLUMNS.values()) + 1

# Columns shown on the MIS snapshot table, in display order
MIS_DISPLAY_COLUMNS: Tuple[int, ...] = (0, 1, 2, 3, 5, 6, 7, 8, 10, 11, 14, 17, 18)


@dataclass(frozen=True)
class ContestRecord:
    company_name: str
    staff_name: str
    outstanding: str
    foreign_trip_target: str
    fresh_customer_target: str
    domestic_trip_target: str
    fresh_customer_achievement: str
    net_growth: str
    contest_total_net: str
    fields: Tuple[str, ...] = field(default=(), repr=False, compare=False)

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "ContestRecord":
        values = {name: fields[index] for name, index in CONTEST_COLUMNS.items()}
        return cls(fields=tuple(fields), **values)


def display_cells(fields: Sequence[str], columns: Sequence[int] = MIS_DISPLAY_COLUMNS) -> list[str]:
    """Project a row onto the display columns, padding missing cells with ''."""
    return [fields[i] if i < len(fields) else "" for i in columns]


# --- Master employee roster ---------------------------------------------------

EMPLOYEE_FIELD_NAMES: Tuple[str, ...] = (
    "Employee Code",
    "Employee Name",
    "Branch Name",
    "Designation",
    "Division",
)


@dataclass(frozen=True)
class EmployeeRecord:
    code: str
    name: str
    branch: str
    designation: str
    division: str

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "EmployeeRecord":
        return cls(*fields[: len(EMPLOYEE_FIELD_NAMES)])

    def as_dict(self) -> Dict[str, str]:
        return dict(
            zip(
                EMPLOYEE_FIELD_NAMES,
                (self.code, self.name, self.branch, self.designation, self.division),
            )
        )


# --- Canvassing activity log --------------------------------------------------

ACTIVITY_COLUMNS: Dict[str, int] = {
    "date": 0,
    "employee_code": 1,
    "activity_type": 2,
}
ACTIVITY_OPTIONAL_COLUMNS: Dict[str, int] = {
    "employee_name": 3,
}


@dataclass(frozen=True)
class ActivityRecord:
    date: str
    employee_code: str
    activity_type: str
    employee_name: str = ""

    @classmethod
    def from_fields(cls, fields: Sequence[str]) -> "ActivityRecord":
        values = {name: fields[index] for name, index in ACTIVITY_COLUMNS.items()}
        for name, index in ACTIVITY_OPTIONAL_COLUMNS.items():
            if index < len(fields):
                values[name] = fields[index]
        return cls(**values)


CONTEST_SCHEMA: RecordSchema[ContestRecord] = RecordSchema(
    name="contest", min_fields=CONTEST_MIN_FIELDS, factory=ContestRecord.from_fields
)
EMPLOYEE_SCHEMA: RecordSchema[EmployeeRecord] = RecordSchema(
    name="master employees", min_fields=len(EMPLOYEE_FIELD_NAMES), factory=EmployeeRecord.from_fields
)
ACTIVITY_SCHEMA: RecordSchema[ActivityRecord] = RecordSchema(
    name="canvassing", min_fields=len(ACTIVITY_COLUMNS), factory=ActivityRecord.from_fields
)
