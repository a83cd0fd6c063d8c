"""Dashboard page with KPIs, sales chart, inventory summary and recent transactions."""
import pandas as pd
import streamlit as st

from core import mock_data
from core.services import badge_markdown, format_currency, format_date, paginate, sales_window
from core.store import Store
from ui.charts import charts
from ui.components import render_kpi_cards
from ui.sidebar import navigate


def _render_sales_chart():
    col1, col2, col3 = st.columns([3, 1, 1])
    col1.subheader("\U0001F4C8 Sales Overview")
    date_range = col2.selectbox(
        "Range",
        ["year", "quarter", "month"],
        format_func=lambda r: {"year": "This Year", "quarter": "This Quarter", "month": "This Month"}[r],
        key="dash_sales_range",
    )
    compare = col3.toggle("Compare", value=True, key="dash_sales_compare")
    series = sales_window(mock_data.SALES_SERIES, date_range)
    y = ["sales", "previous_sales"] if compare else "sales"
    charts.render(
        series,
        "area",
        x="date",
        y=y,
        labels={"date": "Month", "value": "Sales ($)", "variable": ""},
    )


def _render_inventory_summary():
    st.subheader("\U0001F4E6 Inventory Summary")
    st.caption("Low stock items")
    for entry in mock_data.LOW_STOCK_ITEMS:
        ratio = entry.stock / entry.max_stock if entry.max_stock else 0
        st.progress(min(ratio, 1.0), text=f"{entry.name}: {entry.stock}/{entry.max_stock}")

    st.caption("Top selling products")
    top = pd.DataFrame(mock_data.TOP_SELLING_PRODUCTS).rename(
        columns={"name": "Product", "sold": "Sold", "revenue": "Revenue"}
    )
    st.dataframe(top, width="stretch", hide_index=True)

    st.caption("Inventory by category")
    for row in mock_data.INVENTORY_BY_CATEGORY:
        st.progress(row["percentage"] / 100, text=f"{row['name']}: {format_currency(row['value'])}")


def _render_quick_actions(store: Store):
    st.subheader("⚡ Quick Actions")
    cols = st.columns(4)
    for idx, (title, description, path) in enumerate(mock_data.QUICK_ACTIONS):
        with cols[idx % 4]:
            if st.button(title, key=f"quick_{idx}", help=description, width="stretch"):
                navigate(store, path)


def _render_recent_transactions():
    st.subheader("\U0001F9FE Recent Transactions")
    if "dash_tx_page" not in st.session_state:
        st.session_state.dash_tx_page = 1
    rows, total_pages = paginate(mock_data.TRANSACTIONS, st.session_state.dash_tx_page)

    header = st.columns([2, 3, 3, 2, 2, 2])
    for col, label in zip(header, ["ID", "Customer", "Date", "Amount", "Status", "Method"]):
        col.markdown(f"**{label}**")
    for tx in rows:
        cols = st.columns([2, 3, 3, 2, 2, 2])
        cols[0].write(tx.id)
        cols[1].write(tx.customer)
        cols[2].write(format_date(tx.date, with_time=True))
        cols[3].write(format_currency(tx.amount))
        cols[4].markdown(badge_markdown("transaction", tx.status))
        cols[5].write(tx.payment_method)

    col1, col2, col3 = st.columns([1, 2, 1])
    if col1.button("‹ Previous", disabled=st.session_state.dash_tx_page <= 1, key="dash_tx_prev"):
        st.session_state.dash_tx_page -= 1
        st.rerun()
    col2.caption(f"Page {st.session_state.dash_tx_page} of {total_pages}")
    if col3.button("Next ›", disabled=st.session_state.dash_tx_page >= total_pages, key="dash_tx_next"):
        st.session_state.dash_tx_page += 1
        st.rerun()


def render(store: Store):
    """Render the dashboard page."""
    st.header("\U0001F4CA Dashboard")
    render_kpi_cards(mock_data.KPIS)

    col1, col2 = st.columns([2, 1])
    with col1:
        _render_sales_chart()
    with col2:
        _render_inventory_summary()

    st.markdown("---")
    _render_quick_actions(store)
    st.markdown("---")
    _render_recent_transactions()
