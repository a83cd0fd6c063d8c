"""Inventory page: item list, categories, sub-categories and analytics."""
import logging
from dataclasses import replace

import pandas as pd
import streamlit as st
from streamlit_free_text_select import st_free_text_select

from core import config, mock_data
from core.constants import (
    ALL,
    DEFAULT_CATEGORY,
    DEFAULT_SUBCATEGORY,
    INVENTORY_CATEGORIES,
    INVENTORY_SUBCATEGORIES,
)
from core.models import InventoryItem
from core.services import (
    INVENTORY_COLUMNS,
    badge_markdown,
    excel_template,
    export_excel,
    export_pdf,
    filter_categories,
    filter_inventory,
    filter_subcategories,
    format_currency,
    inventory_summary,
    margin_table,
    profit_margin,
    rows_to_items,
    to_int,
    to_number,
    value_by_category,
)
from core.store import ImportItems, Store, ToggleCategory, new_item_id, save_item
from ui.charts import charts
from ui.components import confirm_delete_prompt, render_detail, request_delete, table

logger = logging.getLogger(__name__)

XLSX_MIME = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _category_input(options, current: str, key: str) -> str:
    """Category select with free-text entry; matches existing names case-insensitively."""
    options = sorted(set(options) | ({current} if current else set()), key=str.casefold)
    value = st_free_text_select(
        "Category",
        options,
        index=options.index(current) if current in options else None,
        key=key,
        placeholder="Type to search or add",
    )
    value = (value or "").strip()
    match = next((c for c in options if c.lower() == value.lower()), None)
    return match if match else value.title()


def _close_form():
    st.session_state.pop("inv_form_mode", None)


def _render_form(store: Store):
    """Add/edit form. `inv_form_mode` is "new" or the id of the item being edited."""
    mode = st.session_state.get("inv_form_mode")
    if not mode:
        return
    item = store.find_item(mode) if mode != "new" else None
    if mode != "new" and item is None:
        _close_form()
        return
    if item is None:
        item = InventoryItem(
            id="",
            sku=f"SKU-{pd.Timestamp.now().value // 1_000_000}",
            name="",
            category="Electronics",
            sub_category="",
            reorder_point=config.LOW_STOCK_THRESHOLD,
        )

    with st.container(border=True):
        st.subheader("✏️ Edit Item" if item.id else "➕ Add Item")
        col1, col2 = st.columns(2)
        with col1:
            name = st.text_input("Name *", value=item.name, key=f"inv_name_{mode}")
            sku = st.text_input("SKU", value=item.sku, key=f"inv_sku_{mode}")
            category = _category_input(
                [i.category for i in store.state.inventory] + INVENTORY_CATEGORIES,
                item.category,
                key=f"inv_category_{mode}",
            )
            sub_options = INVENTORY_SUBCATEGORIES.get(category, [DEFAULT_SUBCATEGORY])
            if item.sub_category and item.sub_category not in sub_options:
                sub_options = [item.sub_category] + sub_options
            sub_category = st.selectbox(
                "Sub Category",
                sub_options,
                index=sub_options.index(item.sub_category) if item.sub_category in sub_options else 0,
                key=f"inv_sub_{mode}_{category}",
            )
            supplier = st.text_input("Supplier", value=item.supplier, key=f"inv_supplier_{mode}")
        with col2:
            # Plain text inputs: anything that isn't a number is saved as 0
            quantity = st.text_input("Quantity", value=str(item.quantity), key=f"inv_qty_{mode}")
            reorder_point = st.text_input(
                "Reorder point", value=str(item.reorder_point), key=f"inv_reorder_{mode}",
                help="Quantity at or below which the item is flagged Low Stock",
            )
            cost = st.text_input("Cost", value=f"{item.cost:.2f}", key=f"inv_cost_{mode}")
            price = st.text_input("Price", value=f"{item.price:.2f}", key=f"inv_price_{mode}")
            image = st.text_input("Image URL", value=item.image, key=f"inv_image_{mode}")
        description = st.text_area("Description", value=item.description, key=f"inv_desc_{mode}")

        col1, col2 = st.columns([1, 1])
        if col1.button("\U0001F4BE Save", type="primary", disabled=not name.strip(), key=f"inv_save_{mode}"):
            saved = replace(
                item,
                name=name.strip(),
                sku=sku.strip() or item.sku,
                category=category or DEFAULT_CATEGORY,
                sub_category=sub_category or DEFAULT_SUBCATEGORY,
                quantity=to_int(quantity),
                reorder_point=to_int(reorder_point),
                cost=to_number(cost),
                price=to_number(price),
                supplier=supplier.strip(),
                image=image.strip(),
                description=description.strip(),
            )
            store.dispatch(save_item(saved))
            st.toast(f"✅ Saved '{saved.name}'", icon="\U0001F4BE")
            _close_form()
            st.rerun()
        if col2.button("Cancel", key=f"inv_cancel_{mode}"):
            _close_form()
            st.rerun()


def _render_view(item: InventoryItem):
    render_detail(
        item.name,
        [
            ("SKU", item.sku),
            ("Status", badge_markdown("stock", item.status)),
            ("Category", item.category),
            ("Sub Category", item.sub_category),
            ("Quantity", item.quantity),
            ("Reorder point", item.reorder_point),
            ("Cost", format_currency(item.cost)),
            ("Price", format_currency(item.price)),
            ("Profit margin", f"{profit_margin(item.cost, item.price):.1f}%"),
            ("Stock value", format_currency(item.quantity * item.price)),
            ("Supplier", item.supplier),
            ("Last restocked", item.last_restocked),
            ("Description", item.description),
        ],
    )
    if item.image:
        st.image(item.image, width=240)


def _render_import_export(store: Store, items):
    with st.expander("\U0001F4E5 Import / Export"):
        col1, col2, col3 = st.columns(3)
        try:
            col1.download_button(
                "Download Excel template",
                data=excel_template(),
                file_name="inventory_template.xlsx",
                mime=XLSX_MIME,
            )
            if items:
                col2.download_button(
                    "Export to Excel",
                    data=export_excel(items),
                    file_name="inventory_export.xlsx",
                    mime=XLSX_MIME,
                )
                col3.download_button(
                    "Export to PDF",
                    data=export_pdf(items),
                    file_name="inventory_export.pdf",
                    mime="application/pdf",
                )
        except Exception as e:
            logger.exception("Inventory export failed")
            st.error(f"Export failed: {e}")

        upload = st.file_uploader(
            "Import from Excel",
            type=["xlsx", "xls"],
            help="Use the template headers. Rows with a known SKU update that item.",
        )
        if upload is None:
            return
        try:
            import_df = pd.read_excel(upload)
            to_save, counts = rows_to_items(import_df, store.state.inventory, new_item_id)
        except Exception as e:
            logger.exception("Inventory import failed")
            st.error(f"Failed to read file: {e}")
            return

        st.dataframe(import_df.head(25), width="stretch", hide_index=True)
        st.caption(
            f"Ready: {counts['added']} new, {counts['updated']} updated, {counts['skipped']} skipped (no name), "
            f"{counts['duplicates']} repeated SKU row(s) merged."
        )
        if st.button("Import items", disabled=not to_save):
            store.dispatch(ImportItems(tuple(to_save)))
            st.success(
                f"Import complete. Added: {counts['added']}, Updated: {counts['updated']}, "
                f"Skipped: {counts['skipped']}"
            )


def _render_items_tab(store: Store):
    items = store.state.inventory
    col1, col2, col3, col4 = st.columns([3, 2, 2, 1])
    query = col1.text_input("Search", placeholder="Search by name, SKU or category", key="inv_search")
    categories = [ALL] + sorted({i.category for i in items}, key=str.casefold)
    category = col2.selectbox("Category", categories, format_func=lambda c: "All Categories" if c == ALL else c,
                              key="inv_category_filter")
    scope = items if category == ALL else [i for i in items if i.category == category]
    sub_categories = [ALL] + sorted({i.sub_category for i in scope}, key=str.casefold)
    sub_category = col3.selectbox(
        "Sub Category", sub_categories, format_func=lambda c: "All" if c == ALL else c,
        key=f"inv_sub_filter_{category}",
    )
    col4.write("")
    if col4.button("➕ Add Item", width="stretch"):
        st.session_state.inv_form_mode = "new"
        st.rerun()

    filtered = filter_inventory(items, query.strip(), category, sub_category)
    filtered = sorted(filtered, key=lambda i: i.name.casefold())

    confirm_delete_prompt(store, "inventory")
    _render_form(store)

    def _edit(item):
        st.session_state.inv_form_mode = item.id
        st.rerun()

    selected = table.render(
        INVENTORY_COLUMNS[:8],
        filtered,
        row_actions={
            "✏️ Edit": _edit,
            "\U0001F5D1️ Delete": lambda item: request_delete(store, "inventory", item.id, item.name),
        },
        key="inv_table",
        empty_message="No items match your search.",
    )
    if selected is not None:
        _render_view(selected)

    _render_import_export(store, filtered)


def _render_categories_tab(store: Store):
    query = st.text_input("Search categories", key="cat_search")
    for category in filter_categories(store.state.categories, query.strip()):
        col1, col2, col3 = st.columns([4, 2, 2])
        arrow = "▾" if category.expanded else "▸"
        if col1.button(f"{arrow} {category.name}", key=f"cat_toggle_{category.name}"):
            store.dispatch(ToggleCategory(category.name))
            st.rerun()
        col2.write(f"{category.items} items")
        col3.write(format_currency(category.value))
        if category.expanded:
            if category.subcategories:
                for sub in category.subcategories:
                    st.caption(f" {sub.name} · {sub.items} items · {format_currency(sub.value)}")
            else:
                st.caption(" No sub categories")


def _render_subcategories_tab():
    col1, col2 = st.columns([3, 2])
    query = col1.text_input("Search sub categories", key="subcat_search")
    parents = [ALL] + sorted({s.parent_category for s in mock_data.SUBCATEGORIES})
    parent = col2.selectbox("Parent category", parents,
                            format_func=lambda c: "All Categories" if c == ALL else c, key="subcat_parent")
    rows = filter_subcategories(mock_data.SUBCATEGORIES, query.strip(), parent)
    table.render(
        [("name", "Sub Category"), ("parent_category", "Parent Category"), ("items", "Items")],
        rows,
        key="subcat_table",
        empty_message="No sub categories found.",
    )


def _render_analytics_tab(store: Store):
    items = store.state.inventory
    summary = inventory_summary(items)
    col1, col2, col3, col4 = st.columns(4)
    col1.metric("Total Items", summary["total_items"])
    col2.metric("Stock Value (Retail)", format_currency(summary["retail_value"]))
    col3.metric("Low Stock", summary["low_stock"])
    col4.metric("Out of Stock", summary["out_of_stock"])
    st.caption(f"Stock value at cost: {format_currency(summary['cost_value'])} · "
               f"{summary['total_units']} units on hand")

    col1, col2 = st.columns(2)
    with col1:
        charts.render(value_by_category(items), "bar", x="category", y="value",
                      title="Stock Value by Category", labels={"category": "Category", "value": "Value ($)"})
    with col2:
        st.subheader("Profit Margins")
        st.dataframe(margin_table(items), width="stretch", hide_index=True)


def render(store: Store):
    """Render the inventory page."""
    st.header("\U0001F4E6 Inventory")
    items_tab, categories_tab, sub_tab, analytics_tab = st.tabs(
        ["Inventory", "Categories", "Sub Categories", "Analytics"]
    )
    with items_tab:
        _render_items_tab(store)
    with categories_tab:
        _render_categories_tab(store)
    with sub_tab:
        _render_subcategories_tab()
    with analytics_tab:
        _render_analytics_tab(store)
