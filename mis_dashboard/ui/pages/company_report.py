from __future__ import annotations

from datetime import date
from typing import List, Optional, Sequence

import pandas as pd
import streamlit as st

from mis_dashboard.data.aggregate import CompanySummary, summarize_companies, summarize_company, unique_companies
from mis_dashboard.ui.components.charts import bar_chart, render_plotly
from mis_dashboard.ui.components.formatting import format_indian
from mis_dashboard.ui.components.kpi import KpiCard, render_kpi_cards
from mis_dashboard.ui.components.tables import render_table
from mis_dashboard.ui.pages.context import PageContext

NO_COMPANY = "-- Select Company --"


def month_labels(today: Optional[date] = None, count: int = 12) -> List[str]:
    """Most recent `count` months, newest first, as "July 2024"."""
    today = today or date.today()
    year, month = today.year, today.month
    labels = []
    for _ in range(count):
        labels.append(date(year, month, 1).strftime("%B %Y"))
        month -= 1
        if month == 0:
            year, month = year - 1, 12
    return labels


def summary_cards(summary: CompanySummary) -> List[KpiCard]:
    return [
        KpiCard("Net Growth", summary.total_net_growth),
        KpiCard("Staff Count", summary.staff_count, indian_grouping=False),
        KpiCard("Foreign Trip Winners", summary.foreign_trip_winners, indian_grouping=False),
        KpiCard("Domestic Trip Winners", summary.domestic_trip_winners, indian_grouping=False),
    ]


def leaderboard_frame(summaries: Sequence[CompanySummary]) -> pd.DataFrame:
    frame = pd.DataFrame(
        [
            {
                "Company": s.company,
                "Staff": s.staff_count,
                "Net Growth": s.total_net_growth,
                "Foreign Trip Winners": s.foreign_trip_winners,
                "Domestic Trip Winners": s.domestic_trip_winners,
            }
            for s in summaries
        ],
        columns=["Company", "Staff", "Net Growth", "Foreign Trip Winners", "Domestic Trip Winners"],
    )
    return frame.sort_values("Net Growth", ascending=False, kind="stable").reset_index(drop=True)


def render(context: PageContext) -> None:
    st.subheader("Company Report")
    records = context.session.contest_records
    if not records:
        st.info("Contest data is not loaded yet.")
        return

    col_company, col_month = st.columns(2)
    with col_company:
        company = st.selectbox(
            "Company",
            options=[NO_COMPANY] + unique_companies(records),
            key="company_report_company",
        )
    with col_month:
        month_label = st.selectbox("Month", options=month_labels(), key="company_report_month")

    if company == NO_COMPANY:
        st.info("No company selected.")
    else:
        summary = summarize_company(records, company)
        st.markdown(f"**Report for: {company} (Data for {month_label})**")
        render_kpi_cards(summary_cards(summary), columns=4)

    st.markdown("#### All Companies")
    board = leaderboard_frame(summarize_companies(records))
    if board.empty:
        st.info("No companies found in the contest sheet.")
        return
    render_plotly(
        bar_chart(
            board,
            x="Company",
            y=["Foreign Trip Winners", "Domestic Trip Winners"],
            title="Trip Winners by Company",
            yaxis_title="Winners",
        )
    )
    display = board.copy()
    display["Net Growth"] = display["Net Growth"].apply(format_indian)
    render_table(display, height=360)
