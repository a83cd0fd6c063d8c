"""Orders page: searchable, tabbed order list with a detail panel."""
import logging

import streamlit as st

from core.constants import ORDER_TABS
from core.services import badge_markdown, filter_orders, format_currency, format_date
from core.store import ORDERS, RecordAction, Store
from ui.components import confirm_delete_prompt, list_toolbar, render_detail, request_delete, table

logger = logging.getLogger(__name__)

ORDER_COLUMNS = [
    ("id", "Order"),
    ("customer", "Customer"),
    ("date", "Date"),
    ("total", "Total"),
    ("status", "Status"),
    ("payment_status", "Payment"),
    ("items", "Items"),
]


def _render_order(order):
    render_detail(
        f"Order {order.id}",
        [
            ("Customer", order.customer),
            ("Date", format_date(order.date)),
            ("Status", badge_markdown("order", order.status)),
            ("Payment", badge_markdown("payment", order.payment_status)),
            ("Items", order.items),
            ("Total", format_currency(order.total)),
            ("Shipping", order.shipping_method),
        ],
    )


def render(store: Store):
    """Render the orders page."""
    st.header("\U0001F9FE Orders")
    col1, col2 = st.columns([4, 1])
    col1.caption("Manage and track customer orders.")
    if col2.button("\U0001F4E4 Export", width="stretch", key="orders_export"):
        store.dispatch(RecordAction(ORDERS, "export"))
        st.toast("Export queued")

    query, tab = list_toolbar("Search orders...", ORDER_TABS, key="orders")
    rows = filter_orders(store.state.orders, query, tab)

    confirm_delete_prompt(store, ORDERS)

    def _edit(order):
        store.dispatch(RecordAction(ORDERS, "edit", order.id))
        st.toast(f"Editing orders is not available yet ({order.id})")

    selected = table.render(
        ORDER_COLUMNS,
        rows,
        row_actions={
            "✏️ Edit": _edit,
            "\U0001F5D1️ Delete": lambda order: request_delete(store, ORDERS, order.id, f"order {order.id}"),
        },
        key="orders_table",
        column_config={
            "Total": st.column_config.NumberColumn(format="$%.2f"),
        },
        empty_message="No orders found.",
    )
    if selected is not None:
        _render_order(selected)
