"""Reusable UI components."""
import logging
from typing import Callable, Dict, Iterable, List, Optional, Protocol, Sequence, Tuple

import streamlit as st

from core.models import KPI
from core.services import records_frame
from core.store import CancelDelete, ConfirmDelete, RequestDelete, Store

logger = logging.getLogger(__name__)

Columns = Sequence[Tuple[str, str]]
RowActions = Dict[str, Callable[[object], None]]


class TableRenderer(Protocol):
    def render(self, columns: Columns, rows: Sequence, row_actions: Optional[RowActions] = None, **options):
        ...


class DataFrameTable:
    """Default TableRenderer: `st.dataframe` with single-row selection.

    Returns the selected record (or None). Each row action is rendered as a
    button under the table and called with the selected record.
    """

    def render(
        self,
        columns: Columns,
        rows: Sequence,
        row_actions: Optional[RowActions] = None,
        key: str = "table",
        column_config: Optional[dict] = None,
        empty_message: str = "No records to show",
    ):
        if not rows:
            st.info(empty_message)
            return None

        display_df = records_frame(rows, columns)
        event = st.dataframe(
            display_df,
            width="stretch",
            hide_index=True,
            column_config=column_config,
            on_select="rerun",
            selection_mode="single-row",
            key=key,
        )
        selected_rows = list(event.selection.rows) if event and event.selection else []
        if not selected_rows or selected_rows[0] >= len(rows):
            if row_actions:
                st.caption("Select a row to view, edit or delete it.")
            return None

        record = rows[selected_rows[0]]
        if row_actions:
            action_cols = st.columns(len(row_actions))
            for col, (label, handler) in zip(action_cols, row_actions.items()):
                if col.button(label, key=f"{key}_{label}", width="stretch"):
                    handler(record)
        return record


table = DataFrameTable()


def render_kpi_cards(kpis: Iterable[KPI]) -> None:
    """Metric cards in one row."""
    kpis = list(kpis)
    cols = st.columns(len(kpis) or 1)
    for col, kpi in zip(cols, kpis):
        delta = f"{kpi.change}%" if kpi.trend == "up" else f"-{kpi.change}%"
        col.metric(kpi.title, kpi.value, delta, help=kpi.description)


def render_detail(title: str, fields: List[Tuple[str, object]], columns: int = 2) -> None:
    """Read-only detail panel: label/value pairs in a bordered container."""
    with st.container(border=True):
        st.subheader(title)
        cols = st.columns(columns)
        for idx, (label, value) in enumerate(fields):
            with cols[idx % columns]:
                st.caption(label)
                st.markdown(str(value) if value not in (None, "") else "-")


def list_toolbar(search_placeholder: str, tabs: Sequence[str], key: str) -> Tuple[str, str]:
    """Search box and horizontal tab selector used by every list page."""
    col1, col2 = st.columns([2, 3])
    with col1:
        query = st.text_input("Search", placeholder=search_placeholder, key=f"{key}_search")
    with col2:
        tab = st.radio(
            "Filter",
            list(tabs),
            horizontal=True,
            key=f"{key}_tab",
            format_func=lambda t: t.title(),
        )
    return query.strip(), tab


def request_delete(store: Store, kind: str, record_id: str, label: str = "") -> None:
    store.dispatch(RequestDelete(kind, record_id, label))
    st.rerun()


def confirm_delete_prompt(store: Store, kind: str) -> None:
    """Show the confirmation box for a pending delete of this record kind."""
    pending = store.state.pending_delete
    if pending is None or pending.kind != kind:
        return
    with st.container(border=True):
        st.warning(f"Delete {pending.label or pending.record_id}? This cannot be undone.")
        col1, col2 = st.columns(2)
        if col1.button("\U0001F5D1️ Confirm delete", key=f"{kind}_confirm_delete", type="primary"):
            store.dispatch(ConfirmDelete())
            st.toast(f"Deleted {pending.label or pending.record_id}", icon="\U0001F5D1️")
            st.rerun()
        if col2.button("Cancel", key=f"{kind}_cancel_delete"):
            store.dispatch(CancelDelete())
            st.rerun()


def placeholder_view(path: str) -> None:
    """Shown for paths with no module behind them."""
    st.header("\U0001F6A7 Under development")
    st.info(f"The page `{path}` is under development. Pick a module from the sidebar.")
