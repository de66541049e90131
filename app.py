import logging

import streamlit as st

from mis_dashboard.bootstrap_env import ensure_env
from mis_dashboard.config import TABS, configure_logging, load_settings
from mis_dashboard.data.errors import EmptyDocumentError
from mis_dashboard.data.session import ensure_contest_loaded
from mis_dashboard.ui.layout import get_session, setup_page, sidebar_controls
from mis_dashboard.ui.pages import (
    company_report,
    data_quality,
    mis_snapshot,
    non_participants,
    staff_report,
)
from mis_dashboard.ui.pages.context import PageContext

logger = logging.getLogger("mis_dashboard.app")


PAGE_RENDERERS = {
    "mis_snapshot": mis_snapshot.render,
    "company_report": company_report.render,
    "staff_report": staff_report.render,
    "non_participants": non_participants.render,
    "data_quality": data_quality.render,
}


def main() -> None:
    ensure_env()
    settings = load_settings()
    configure_logging(settings.log_level)

    setup_page()
    st.title("MIS Contest Dashboard")

    session = get_session()
    if sidebar_controls(settings, session):
        session.clear()

    # a failed load is kept until Refresh so reruns do not refetch
    if session.needs_contest_fetch:
        with st.spinner("Loading contest data..."):
            ensure_contest_loaded(session, settings)

    failure = session.contest_error
    if isinstance(failure, EmptyDocumentError):
        st.warning(str(failure))
    elif failure is not None:
        st.error(
            "Failed to load data. Please check your published CSV URL and ensure your "
            f"sheet is publicly accessible. Error: {failure}"
        )

    context = PageContext(settings=settings, session=session)

    tab_labels = [tab.label for tab in TABS]
    streamlit_tabs = st.tabs(tab_labels)

    for streamlit_tab, tab_config in zip(streamlit_tabs, TABS):
        renderer = PAGE_RENDERERS.get(tab_config.key)
        if renderer is None:
            continue
        with streamlit_tab:
            renderer(context)


if __name__ == "__main__":
    main()
