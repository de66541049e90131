from __future__ import annotations

from typing import List, Sequence

import pandas as pd
import streamlit as st

from mis_dashboard.data.export import to_delimited
from mis_dashboard.data.schema import MIS_DISPLAY_COLUMNS, display_cells
from mis_dashboard.ui.components.tables import render_table
from mis_dashboard.ui.pages.context import PageContext


def display_captions(header: Sequence[str], columns: Sequence[int] = MIS_DISPLAY_COLUMNS) -> List[str]:
    """Header cells for the display columns; blanks and repeats get a positional name."""
    captions: List[str] = []
    for caption, index in zip(display_cells(header, columns), columns):
        if not caption or caption in captions:
            caption = f"Column {index + 1}"
        captions.append(caption)
    return captions


def snapshot_frame(header: Sequence[str], rows: Sequence[Sequence[str]]) -> pd.DataFrame:
    """Every sheet row projected onto the display columns; short rows are padded, not dropped."""
    rows = [display_cells(row) for row in rows]
    # rows with nothing in them are padding at the bottom of the sheet
    rows = [row for row in rows if any(cell for cell in row)]
    return pd.DataFrame(rows, columns=display_captions(header), dtype=object)


def render(context: PageContext) -> None:
    st.subheader("All Branch Snapshot")
    table = context.session.contest
    if table is None:
        st.info("Contest data is not loaded yet.")
        return

    frame = snapshot_frame(table.header, table.rows)

    search = st.text_input("Search by company or staff name", key="mis_snapshot_search").strip().lower()
    if search and not frame.empty:
        mask = frame.apply(lambda col: col.astype(str).str.lower().str.contains(search, regex=False)).any(axis=1)
        frame = frame[mask]

    st.caption(f"{len(frame)} rows")
    render_table(
        frame,
        height=520,
        empty_message="No rows match the search term.",
        export_csv=to_delimited(list(frame.columns), frame.itertuples(index=False, name=None)),
        export_file_name="mis_snapshot.csv",
        key="mis_snapshot_download",
    )
