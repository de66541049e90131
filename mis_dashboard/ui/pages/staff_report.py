from __future__ import annotations

import pandas as pd
import streamlit as st

from mis_dashboard.data.aggregate import StaffReport, build_staff_report, search_staff, unique_companies
from mis_dashboard.ui.components.formatting import (
    NOT_APPLICABLE_LABEL,
    PLACEHOLDER,
    format_indian,
    format_shortfall,
)
from mis_dashboard.ui.pages.context import PageContext

NO_COMPANY = "-- Select Company --"


def target_table(report: StaffReport) -> pd.DataFrame:
    rows = []
    for line in report.lines:
        if line.applicable:
            rows.append(
                {
                    "Target": line.label,
                    "Target Value": format_indian(line.target),
                    "Achievement": format_indian(line.achievement),
                    "Shortfall": format_shortfall(line.shortfall),
                }
            )
        else:
            rows.append(
                {
                    "Target": line.label,
                    "Target Value": NOT_APPLICABLE_LABEL,
                    "Achievement": PLACEHOLDER,
                    "Shortfall": PLACEHOLDER,
                }
            )
    return pd.DataFrame(rows, columns=["Target", "Target Value", "Achievement", "Shortfall"])


def render(context: PageContext) -> None:
    st.subheader("Staff Report")
    records = context.session.contest_records
    if not records:
        st.info("Contest data is not loaded yet.")
        return

    company = st.selectbox(
        "Company",
        options=[NO_COMPANY] + unique_companies(records),
        key="staff_report_company",
    )
    if company == NO_COMPANY:
        st.info("No staff selected.")
        return

    query = st.text_input("Search staff by name", key=f"staff_report_query_{company}")
    suggestions = search_staff(records, company, query)
    if not query.strip():
        st.info("No staff selected.")
        return
    if not suggestions:
        st.info("No staff in this company match the search.")
        return

    choice = st.radio(
        "Matching staff",
        options=range(len(suggestions)),
        format_func=lambda i: suggestions[i].staff_name,
        key=f"staff_report_choice_{company}",
    )
    report = build_staff_report(suggestions[choice])

    st.markdown(f"**Report for: {report.staff_name} ({report.company})**")
    st.markdown(f"Out standing: {format_indian(report.outstanding)}")
    st.dataframe(target_table(report), use_container_width=True, hide_index=True)
