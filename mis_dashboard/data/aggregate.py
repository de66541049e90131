"""
Report aggregation over parsed sheet records.

Every function here is pure: records and criteria in, a new value out. The
presentation layer owns the records (see `session.ReportSession`) and passes
them in explicitly.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Iterable, List, Optional, Sequence, Set

import pandas as pd

from mis_dashboard.data.schema import ActivityRecord, ContestRecord, EmployeeRecord

logger = logging.getLogger(__name__)

DAY_MONTH_YEAR = re.compile(r"^(\d{2})/(\d{2})/(\d{4})$")

ACTIVITY_VISIT = "visit"
ACTIVITY_CALLS = "calls"
STAFF_SUGGESTION_LIMIT = 10


def to_number(value: object) -> float:
    """Coerce free-form numeric text ("1,234.5", "", "n/a") to a float; bad input is 0.0."""
    if value is None:
        return 0.0
    cleaned = str(value).replace(",", "").strip()
    if not cleaned:
        return 0.0
    parsed = pd.to_numeric(cleaned, errors="coerce")
    try:
        number = float(parsed)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def month_key(value: Optional[str]) -> Optional[str]:
    """Return "YYYY-MM" for a dd/mm/yyyy date, or None when the date is malformed."""
    if not value:
        return None
    match = DAY_MONTH_YEAR.match(value.strip())
    if not match:
        return None
    try:
        parsed = datetime.strptime(match.group(0), "%d/%m/%Y")
    except ValueError:
        return None
    return parsed.strftime("%Y-%m")


def current_month_key(today: Optional[date] = None) -> str:
    today = today or date.today()
    return f"{today.year:04d}-{today.month:02d}"


def filter_by_company(records: Iterable[ContestRecord], company: str) -> List[ContestRecord]:
    return [r for r in records if r.company_name == company]


def filter_by_month(records: Iterable[ActivityRecord], target_month: str) -> List[ActivityRecord]:
    matched: List[ActivityRecord] = []
    malformed = 0
    for record in records:
        key = month_key(record.date)
        if key is None:
            malformed += 1
            continue
        if key == target_month:
            matched.append(record)
    if malformed:
        logger.warning("Ignored %d activity rows with malformed dates (expected dd/mm/yyyy)", malformed)
    logger.info("Filtered %d activity rows for %s", len(matched), target_month)
    return matched


def filter_by_activity_type(records: Iterable[ActivityRecord], activity_type: str) -> List[ActivityRecord]:
    wanted = activity_type.lower()
    return [r for r in records if r.activity_type and r.activity_type.lower() == wanted]


def unique_companies(records: Iterable[ContestRecord]) -> List[str]:
    return sorted({r.company_name for r in records if r.company_name})


# --- Winner determination ----------------------------------------------------

def meets_target(target: float, achievement: float) -> bool:
    """A target counts only when positive; it is met when achievement reaches it."""
    return target > 0 and achievement >= target


def clears_hurdle(hurdle_target: float, hurdle_achievement: float) -> bool:
    return hurdle_achievement >= hurdle_target


def is_foreign_trip_winner(record: ContestRecord) -> bool:
    return meets_target(to_number(record.foreign_trip_target), to_number(record.contest_total_net)) and clears_hurdle(
        to_number(record.fresh_customer_target), to_number(record.fresh_customer_achievement)
    )


def is_domestic_trip_winner(record: ContestRecord) -> bool:
    return meets_target(to_number(record.domestic_trip_target), to_number(record.contest_total_net)) and clears_hurdle(
        to_number(record.fresh_customer_target), to_number(record.fresh_customer_achievement)
    )


@dataclass(frozen=True)
class CompanySummary:
    company: str
    staff_count: int
    total_net_growth: float
    foreign_trip_winners: int
    domestic_trip_winners: int


def summarize_company(records: Iterable[ContestRecord], company: str) -> CompanySummary:
    company_rows = filter_by_company(records, company)
    return CompanySummary(
        company=company,
        staff_count=len(company_rows),
        total_net_growth=sum(to_number(r.net_growth) for r in company_rows),
        foreign_trip_winners=sum(1 for r in company_rows if is_foreign_trip_winner(r)),
        domestic_trip_winners=sum(1 for r in company_rows if is_domestic_trip_winner(r)),
    )


def summarize_companies(records: Sequence[ContestRecord]) -> List[CompanySummary]:
    return [summarize_company(records, company) for company in unique_companies(records)]


# --- Staff lookup ------------------------------------------------------------

def search_staff(
    records: Iterable[ContestRecord],
    company: str,
    query: str,
    limit: int = STAFF_SUGGESTION_LIMIT,
) -> List[ContestRecord]:
    """Staff of `company` whose name contains `query` (case-insensitive), capped at `limit`."""
    needle = (query or "").strip().lower()
    if not needle or not company:
        return []
    matches: List[ContestRecord] = []
    for record in records:
        if record.company_name == company and needle in (record.staff_name or "").lower():
            matches.append(record)
            if len(matches) >= limit:
                break
    return matches


@dataclass(frozen=True)
class TargetLine:
    label: str
    target: float
    achievement: float
    applicable: bool = True

    @property
    def shortfall(self) -> Optional[float]:
        """Remaining gap, or None when the target is met or exceeded."""
        gap = self.target - self.achievement
        return gap if gap > 0 else None


@dataclass(frozen=True)
class StaffReport:
    staff_name: str
    company: str
    outstanding: float
    lines: List[TargetLine] = field(default_factory=list)


def build_staff_report(record: ContestRecord) -> StaffReport:
    contest_achievement = to_number(record.contest_total_net)
    domestic_target = to_number(record.domestic_trip_target)
    return StaffReport(
        staff_name=record.staff_name,
        company=record.company_name,
        outstanding=to_number(record.outstanding),
        lines=[
            TargetLine("Foreign Trip Contest Target", to_number(record.foreign_trip_target), contest_achievement),
            TargetLine(
                "Domestic Trip Contest Target",
                domestic_target,
                contest_achievement,
                applicable=domestic_target > 0,
            ),
            TargetLine(
                "Fresh Customer Target",
                to_number(record.fresh_customer_target),
                to_number(record.fresh_customer_achievement),
            ),
        ],
    )


# --- Non-participants --------------------------------------------------------

def participant_codes(activities: Iterable[ActivityRecord], activity_type: str) -> Set[str]:
    return {r.employee_code for r in filter_by_activity_type(activities, activity_type)}


def non_participants(master: Iterable[EmployeeRecord], codes: Set[str]) -> List[EmployeeRecord]:
    """Master roster minus every employee whose code engaged; master order is kept."""
    return [employee for employee in master if employee.code not in codes]


@dataclass(frozen=True)
class NonParticipantReport:
    month: str
    master_count: int
    activity_count: int
    visit: List[EmployeeRecord]
    calls: List[EmployeeRecord]

    @property
    def no_activity_in_month(self) -> bool:
        return self.activity_count == 0


def build_non_participant_report(
    master: Sequence[EmployeeRecord],
    activities: Iterable[ActivityRecord],
    month: Optional[str] = None,
) -> NonParticipantReport:
    """Employees with no visit / no calls activity in `month` (default: current month).

    With no activity at all in the month, the whole roster is non-participating
    for both activity types.
    """
    month = month or current_month_key()
    month_activities = filter_by_month(activities, month)
    if not month_activities:
        return NonParticipantReport(
            month=month,
            master_count=len(master),
            activity_count=0,
            visit=list(master),
            calls=list(master),
        )
    return NonParticipantReport(
        month=month,
        master_count=len(master),
        activity_count=len(month_activities),
        visit=non_participants(master, participant_codes(month_activities, ACTIVITY_VISIT)),
        calls=non_participants(master, participant_codes(month_activities, ACTIVITY_CALLS)),
    )
