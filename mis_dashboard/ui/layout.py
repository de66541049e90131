"""
Layout helpers for the Streamlit application (page setup, sidebar).
"""

from __future__ import annotations

import streamlit as st

from mis_dashboard.config import DashboardSettings
from mis_dashboard.data.session import ReportSession

SESSION_STATE_KEY = "mis_report_session"


def setup_page() -> None:
    """Set Streamlit page configuration."""
    st.set_page_config(
        page_title="MIS Contest Dashboard",
        layout="wide",
        page_icon=":bar_chart:",
    )


def get_session() -> ReportSession:
    """Return the view's ReportSession, creating it on first use."""
    session = st.session_state.get(SESSION_STATE_KEY)
    if not isinstance(session, ReportSession):
        session = ReportSession()
        st.session_state[SESSION_STATE_KEY] = session
    return session


def sidebar_controls(settings: DashboardSettings, session: ReportSession) -> bool:
    """Render the sidebar and return True when the user asked for fresh data."""
    refresh = st.sidebar.button("🔄 Refresh Data")

    with st.sidebar.expander("Data sources", expanded=False):
        st.caption(f"Contest sheet: {settings.mis_csv_url}")
        st.caption(f"Master employees: {settings.master_employees_csv_url}")
        st.caption(f"Canvassing log: {settings.canvassing_csv_url or 'not configured'}")
        st.caption(f"Request timeout: {settings.request_timeout:g}s")

    if session.contest is not None:
        fetched = session.contest.fetched_at.strftime("%Y-%m-%d %H:%M UTC")
        st.sidebar.caption(f"Contest data fetched {fetched}")
    return refresh
