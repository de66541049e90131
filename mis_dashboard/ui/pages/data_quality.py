from __future__ import annotations

import streamlit as st

from mis_dashboard.data.schema import ACTIVITY_SCHEMA, CONTEST_SCHEMA, EMPLOYEE_SCHEMA
from mis_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from mis_dashboard.ui.pages.context import PageContext


def render(context: PageContext) -> None:
    st.subheader("Data Quality & Definitions")
    diagnostics = context.session.diagnostics()
    if not diagnostics:
        st.info("No diagnostics available yet.")
        return

    for source, values in diagnostics.items():
        st.markdown(f"#### {source.title()} sheet")
        render_kpi_cards(
            [
                KpiCard("Rows Parsed", values.get("record_count"), indian_grouping=False),
                KpiCard("Rows Skipped", values.get("skipped_row_count"), indian_grouping=False),
                KpiCard("Header Columns", values.get("header_column_count"), indian_grouping=False),
            ],
            columns=3,
        )
        for key, value in values.items():
            if key == "skipped_lines" and not value:
                continue
            st.write(f"- **{key.replace('_', ' ').title()}**: {value}")

    st.markdown("#### Parsing Rules")
    st.write(
        f"""
        - Blank lines are ignored; the first line is the header and only counts columns.
        - Rows with fewer columns than required are skipped: contest {CONTEST_SCHEMA.min_fields},
          master employees {EMPLOYEE_SCHEMA.min_fields}, canvassing {ACTIVITY_SCHEMA.min_fields}.
        - Amounts drop thousands separators; empty or non-numeric values count as 0.
        - Activity dates must be dd/mm/yyyy; other dates are left out of monthly reports.
        - A trip winner has a positive contest target, contest achievement at or above it,
          and fresh customer achievement at or above the fresh customer target.
        """
    )
