"""Suppliers page."""
import streamlit as st

from core.constants import SUPPLIER_TABS
from core.services import filter_suppliers, format_currency, format_date
from core.store import SUPPLIERS, RecordAction, Store
from ui.components import confirm_delete_prompt, list_toolbar, render_detail, request_delete, table

SUPPLIER_COLUMNS = [
    ("name", "Supplier"),
    ("contact_person", "Contact"),
    ("email", "Email"),
    ("status", "Status"),
    ("rating", "Rating"),
    ("total_orders", "Orders"),
    ("total_spent", "Total Spent"),
]


def stars(rating: int) -> str:
    """Five-star rating string, e.g. 3 -> "★★★☆☆"."""
    rating = max(0, min(int(rating), 5))
    return "★" * rating + "☆" * (5 - rating)


def _render_supplier(supplier):
    render_detail(
        supplier.name,
        [
            ("Contact person", supplier.contact_person),
            ("Email", supplier.email),
            ("Phone", supplier.phone),
            ("Address", supplier.address),
            ("Supplier since", format_date(supplier.join_date)),
            ("Status", supplier.status.title()),
            ("Rating", stars(supplier.rating)),
            ("Categories", ", ".join(supplier.categories)),
            ("Orders", supplier.total_orders),
            ("Total spent", format_currency(supplier.total_spent)),
        ],
    )


def render(store: Store):
    """Render the suppliers page."""
    st.header("\U0001F69A Suppliers")
    col1, col2 = st.columns([4, 1])
    col1.caption("Manage your product suppliers and vendors.")
    if col2.button("➕ Add Supplier", width="stretch", key="suppliers_add"):
        store.dispatch(RecordAction(SUPPLIERS, "add"))
        st.toast("Adding suppliers is not available yet")

    query, tab = list_toolbar("Search suppliers...", SUPPLIER_TABS, key="suppliers")
    rows = filter_suppliers(store.state.suppliers, query, tab)

    confirm_delete_prompt(store, SUPPLIERS)

    def _edit(supplier):
        store.dispatch(RecordAction(SUPPLIERS, "edit", supplier.id))
        st.toast(f"Editing suppliers is not available yet ({supplier.name})")

    selected = table.render(
        SUPPLIER_COLUMNS,
        rows,
        row_actions={
            "✏️ Edit": _edit,
            "\U0001F5D1️ Delete": lambda s: request_delete(store, SUPPLIERS, s.id, s.name),
        },
        key="suppliers_table",
        column_config={
            "Rating": st.column_config.NumberColumn(format="%d ★"),
            "Total Spent": st.column_config.NumberColumn(format="$%.2f"),
        },
        empty_message="No suppliers found.",
    )
    if selected is not None:
        _render_supplier(selected)
