from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from mis_dashboard.config import DashboardSettings
from mis_dashboard.data.aggregate import NonParticipantReport
from mis_dashboard.data.errors import ReportDataError
from mis_dashboard.data.loader import LoadedTable, load_contest_table
from mis_dashboard.data.schema import ActivityRecord, ContestRecord, EmployeeRecord

logger = logging.getLogger(__name__)


@dataclass
class ReportSession:
    """Most recently fetched sheets for one dashboard view.

    Each replace_* call overwrites the previous table (last write wins). The
    view owns the session and passes it to pages; nothing reads it ambiently.
    """

    contest: Optional[LoadedTable[ContestRecord]] = None
    master: Optional[LoadedTable[EmployeeRecord]] = None
    activities: Optional[LoadedTable[ActivityRecord]] = None
    non_participant_report: Optional[NonParticipantReport] = None
    contest_error: Optional[ReportDataError] = None

    @property
    def needs_contest_fetch(self) -> bool:
        return self.contest is None and self.contest_error is None

    @property
    def contest_records(self) -> List[ContestRecord]:
        return self.contest.records if self.contest else []

    def replace_contest(self, table: LoadedTable[ContestRecord]) -> None:
        self.contest = table
        self.contest_error = None

    def record_contest_failure(self, error: ReportDataError) -> None:
        """Keep the failed load until clear(); callers check it before fetching again."""
        self.contest = None
        self.contest_error = error

    def replace_master(self, table: LoadedTable[EmployeeRecord]) -> None:
        self.master = table
        self.non_participant_report = None

    def replace_activities(self, table: LoadedTable[ActivityRecord]) -> None:
        self.activities = table
        self.non_participant_report = None

    def replace_non_participant_report(self, report: NonParticipantReport) -> None:
        self.non_participant_report = report

    def clear(self) -> None:
        self.contest = None
        self.contest_error = None
        self.master = None
        self.activities = None
        self.non_participant_report = None

    def diagnostics(self) -> Dict[str, Dict[str, Any]]:
        tables = {
            "contest": self.contest,
            "master employees": self.master,
            "canvassing": self.activities,
        }
        out: Dict[str, Dict[str, Any]] = {}
        for label, table in tables.items():
            if table is None:
                continue
            out[label] = {
                "source_url": table.source_url,
                "fetched_at": table.fetched_at.isoformat(timespec="seconds"),
                **table.diagnostics,
            }
        return out


def ensure_contest_loaded(session: ReportSession, settings: DashboardSettings) -> None:
    """Fetch the contest sheet unless it is loaded or its last load failed."""
    if not session.needs_contest_fetch:
        return
    try:
        session.replace_contest(load_contest_table(settings))
    except ReportDataError as exc:
        logger.warning("Contest data load failed: %s", exc)
        session.record_contest_failure(exc)
