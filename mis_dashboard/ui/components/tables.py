"""
Reusable helpers for rendering report tables with a CSV download.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd
import streamlit as st


def render_table(
    df: pd.DataFrame,
    height: int = 400,
    empty_message: str = "No rows to display.",
    export_csv: Optional[str] = None,
    export_file_name: str = "export.csv",
    key: Optional[str] = None,
) -> None:
    """Show `df`; when `export_csv` is given, offer it as a download below the table."""
    if df.empty:
        st.info(empty_message)
        return

    st.dataframe(
        df,
        use_container_width=True,
        height=height,
        hide_index=True,
    )

    if export_csv is not None:
        st.download_button(
            "Download CSV",
            data=export_csv.encode("utf-8"),
            file_name=export_file_name,
            mime="text/csv",
            key=key,
        )
