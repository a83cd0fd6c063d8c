"""Customers page."""
import streamlit as st

from core.constants import CUSTOMER_TABS
from core.services import badge_markdown, filter_customers, format_currency, format_date
from core.store import CUSTOMERS, RecordAction, Store
from ui.components import confirm_delete_prompt, list_toolbar, render_detail, request_delete, table

CUSTOMER_COLUMNS = [
    ("name", "Name"),
    ("email", "Email"),
    ("phone", "Phone"),
    ("type", "Type"),
    ("status", "Status"),
    ("orders", "Orders"),
    ("total_spent", "Total Spent"),
]


def _render_customer(customer):
    render_detail(
        customer.name,
        [
            ("Email", customer.email),
            ("Phone", customer.phone),
            ("Address", customer.address),
            ("Customer since", format_date(customer.join_date)),
            ("Type", badge_markdown("customer", customer.type)),
            ("Status", customer.status.title()),
            ("Orders", customer.orders),
            ("Total spent", format_currency(customer.total_spent)),
        ],
    )
    if customer.avatar:
        st.image(customer.avatar, width=96)


def render(store: Store):
    """Render the customers page."""
    st.header("\U0001F465 Customers")
    col1, col2 = st.columns([4, 1])
    col1.caption("Manage your customer relationships.")
    if col2.button("➕ Add Customer", width="stretch", key="customers_add"):
        store.dispatch(RecordAction(CUSTOMERS, "add"))
        st.toast("Adding customers is not available yet")

    query, tab = list_toolbar("Search customers...", CUSTOMER_TABS, key="customers")
    rows = filter_customers(store.state.customers, query, tab)

    confirm_delete_prompt(store, CUSTOMERS)

    def _edit(customer):
        store.dispatch(RecordAction(CUSTOMERS, "edit", customer.id))
        st.toast(f"Editing customers is not available yet ({customer.name})")

    selected = table.render(
        CUSTOMER_COLUMNS,
        rows,
        row_actions={
            "✏️ Edit": _edit,
            "\U0001F5D1️ Delete": lambda c: request_delete(store, CUSTOMERS, c.id, c.name),
        },
        key="customers_table",
        column_config={"Total Spent": st.column_config.NumberColumn(format="$%.2f")},
        empty_message="No customers found.",
    )
    if selected is not None:
        _render_customer(selected)
