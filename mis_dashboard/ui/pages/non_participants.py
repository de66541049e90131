from __future__ import annotations

import logging
from typing import Sequence

import pandas as pd
import streamlit as st

from mis_dashboard.data.aggregate import build_non_participant_report
from mis_dashboard.data.errors import ReportDataError
from mis_dashboard.data.export import non_participants_csv
from mis_dashboard.data.loader import load_activities, load_master_employees
from mis_dashboard.data.schema import EmployeeRecord
from mis_dashboard.ui.components.tables import render_table
from mis_dashboard.ui.pages.context import PageContext

logger = logging.getLogger(__name__)


def roster_frame(employees: Sequence[EmployeeRecord]) -> pd.DataFrame:
    return pd.DataFrame(
        [
            {
                "SL.No.": index,
                "Employee Code": e.code,
                "Employee Name": e.name,
                "Division": e.division,
                "Designation": e.designation,
            }
            for index, e in enumerate(employees, start=1)
        ],
        columns=["SL.No.", "Employee Code", "Employee Name", "Division", "Designation"],
    )


def _generate(context: PageContext) -> None:
    session = context.session
    master = load_master_employees(context.settings)
    session.replace_master(master)
    activities = load_activities(context.settings)
    session.replace_activities(activities)
    session.replace_non_participant_report(build_non_participant_report(master.records, activities.records))


def _render_section(title: str, activity: str, employees: Sequence[EmployeeRecord], month: str, key: str) -> None:
    st.markdown(f"#### {title}")
    if not employees:
        st.success(f"All employees have participated in {activity} for {month}!")
        return
    st.caption(f"Found {len(employees)} non-participants in {activity} for {month}.")
    render_table(
        roster_frame(employees),
        height=360,
        export_csv=non_participants_csv(employees),
        export_file_name=f"non_participating_in_{activity}_current_month.csv",
        key=key,
    )


def render(context: PageContext) -> None:
    st.subheader("Non-Participants Report")
    st.caption("Employees from the master roster with no canvassing activity in the current month.")

    if st.button("Generate report", key="non_participants_generate"):
        with st.spinner("Generating Non-Participants Reports for the current month..."):
            try:
                _generate(context)
            except ReportDataError as exc:
                logger.warning("Non-participant report failed: %s", exc)
                st.error(f"Failed to generate reports: {exc}")
                return

    report = context.session.non_participant_report
    if report is None:
        st.info("Press 'Generate report' to fetch the roster and this month's canvassing log.")
        return

    if report.no_activity_in_month:
        st.info(
            f"No canvassing data found for the current month ({report.month}). "
            "All employees are considered non-participants for this month."
        )
    else:
        st.success(f"Non-Participants Reports generated successfully for {report.month}.")

    _render_section("Not participating in visits", "visits", report.visit, report.month, "download_visits")
    _render_section("Not participating in calls", "calls", report.calls, report.month, "download_calls")
