# ---------- services.py ----------
"""Pure filters, derivations and file helpers used by the Streamlit pages."""
from __future__ import annotations

import logging
import math
from dataclasses import asdict, replace
from datetime import datetime
from io import BytesIO
from typing import Iterable, List, Optional, Sequence, Tuple, TypeVar

import pandas as pd
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.table import Table as XlTable, TableStyleInfo as XlTableStyleInfo
from reportlab.lib import colors
from reportlab.lib.pagesizes import landscape, letter
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle

from core import config
from core.constants import (
    ALL,
    BADGE_COLORS,
    CUSTOMER_TYPE_BADGES,
    DEFAULT_CATEGORY,
    DEFAULT_SUBCATEGORY,
    ORDER_STATUS_BADGES,
    PAYMENT_STATUS_BADGES,
    STOCK_IN,
    STOCK_LOW,
    STOCK_OUT,
    STOCK_STATUS_BADGES,
    TRANSACTION_STATUS_BADGES,
)
from core.models import (
    Category,
    Customer,
    InventoryItem,
    Order,
    Product,
    SubCategory,
    Supplier,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Inventory columns as (attribute, header) for tables and file export
INVENTORY_COLUMNS: List[Tuple[str, str]] = [
    ("sku", "SKU"),
    ("name", "Name"),
    ("category", "Category"),
    ("sub_category", "Sub Category"),
    ("quantity", "Quantity"),
    ("cost", "Cost"),
    ("price", "Price"),
    ("status", "Status"),
    ("reorder_point", "Reorder Point"),
    ("supplier", "Supplier"),
    ("description", "Description"),
]

# Friendly header -> attribute, for Excel import
IMPORT_HEADER_MAP = {
    "sku": "sku",
    "name": "name",
    "product name": "name",
    "category": "category",
    "sub category": "sub_category",
    "subcategory": "sub_category",
    "sub_category": "sub_category",
    "quantity": "quantity",
    "stock": "quantity",
    "cost": "cost",
    "price": "price",
    "reorder point": "reorder_point",
    "reorder_point": "reorder_point",
    "supplier": "supplier",
    "description": "description",
}


# ---------- numeric coercion ----------

def to_number(value) -> float:
    """Parse a user-entered number; anything unparseable becomes 0."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(str(value).strip().replace(",", ""))
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def to_int(value) -> int:
    """Like `to_number` but truncated to an int."""
    return int(to_number(value))


# ---------- matching & filters ----------

def contains(text: Optional[str], query: str) -> bool:
    """Case-insensitive substring test. An empty query matches anything."""
    if not query:
        return True
    return query.casefold() in (text or "").casefold()


def matches_any(query: str, *fields: Optional[str]) -> bool:
    if not query:
        return True
    return any(contains(f, query) for f in fields)


def matches_query(item: InventoryItem, query: str) -> bool:
    """True when `query` occurs in the item's name, SKU, category or sub-category."""
    return matches_any(query, item.name, item.sku, item.category, item.sub_category)


def filter_inventory(
    items: Iterable[InventoryItem],
    query: str = "",
    category: str = ALL,
    sub_category: str = ALL,
) -> List[InventoryItem]:
    """Apply the search box and the category / sub-category selects."""
    return [
        item
        for item in items
        if matches_query(item, query)
        and (category == ALL or item.category == category)
        and (sub_category == ALL or item.sub_category == sub_category)
    ]


def filter_products(products: Iterable[Product], query: str = "", category: str = ALL) -> List[Product]:
    """POS catalog filter: name substring plus category."""
    return [
        p
        for p in products
        if contains(p.name, query) and (category == ALL or p.category == category)
    ]


def find_by_barcode(products: Iterable[Product], barcode: str) -> Optional[Product]:
    code = (barcode or "").strip()
    if not code:
        return None
    return next((p for p in products if p.barcode == code), None)


def filter_orders(orders: Iterable[Order], query: str = "", tab: str = ALL) -> List[Order]:
    """Orders tab filter; the cancelled tab also lists returned orders."""
    result = []
    for order in orders:
        if not matches_any(query, order.id, order.customer):
            continue
        if tab == ALL:
            result.append(order)
        elif tab == "cancelled":
            if order.status in ("cancelled", "returned"):
                result.append(order)
        elif order.status == tab:
            result.append(order)
    return result


def filter_customers(customers: Iterable[Customer], query: str = "", tab: str = ALL) -> List[Customer]:
    """Customers tab filter; `inactive` keys on status, the other tabs on type."""
    result = []
    for customer in customers:
        if not matches_any(query, customer.name, customer.email):
            continue
        if tab == ALL:
            result.append(customer)
        elif tab == "inactive":
            if customer.status == "inactive":
                result.append(customer)
        elif customer.type == tab:
            result.append(customer)
    return result


def filter_suppliers(suppliers: Iterable[Supplier], query: str = "", tab: str = ALL) -> List[Supplier]:
    """Suppliers tab filter over status or supplied categories."""
    result = []
    for supplier in suppliers:
        if not matches_any(query, supplier.name, supplier.contact_person):
            continue
        cats = supplier.categories
        if tab == ALL:
            keep = True
        elif tab in ("active", "inactive"):
            keep = supplier.status == tab
        elif tab == "electronics":
            keep = "Electronics" in cats
        elif tab == "audio":
            keep = "Audio" in cats
        elif tab == "other":
            keep = "Electronics" not in cats and "Audio" not in cats
        else:
            keep = True
        if keep:
            result.append(supplier)
    return result


def filter_categories(categories: Iterable[Category], query: str = "") -> List[Category]:
    return [c for c in categories if contains(c.name, query)]


def filter_subcategories(
    subcategories: Iterable[SubCategory], query: str = "", parent: str = ALL
) -> List[SubCategory]:
    return [
        s
        for s in subcategories
        if contains(s.name, query) and (parent == ALL or s.parent_category == parent)
    ]


def toggle_category(categories: Sequence[Category], name: str) -> List[Category]:
    """Flip the expanded flag of the named category."""
    return [replace(c, expanded=not c.expanded) if c.name == name else c for c in categories]


# ---------- derivations ----------

def stock_status(quantity: int, reorder_point: int) -> str:
    """Stock label for a quantity against the item's reorder point."""
    if quantity <= 0:
        return STOCK_OUT
    if quantity <= reorder_point:
        return STOCK_LOW
    return STOCK_IN


def with_derived_status(item: InventoryItem) -> InventoryItem:
    """Normalize blank category fields and recompute status."""
    return replace(
        item,
        category=item.category or DEFAULT_CATEGORY,
        sub_category=item.sub_category or DEFAULT_SUBCATEGORY,
        status=stock_status(item.quantity, item.reorder_point),
    )


def profit_margin(cost: float, price: float) -> float:
    """Gross margin as a percentage of the sale price (0 when price is 0)."""
    if not price:
        return 0.0
    return (price - cost) / price * 100


def badge_variant(kind: str, value: str) -> str:
    """Badge variant for a status value; `kind` is order, payment, customer, transaction or stock."""
    tables = {
        "order": ORDER_STATUS_BADGES,
        "payment": PAYMENT_STATUS_BADGES,
        "customer": CUSTOMER_TYPE_BADGES,
        "transaction": TRANSACTION_STATUS_BADGES,
        "stock": STOCK_STATUS_BADGES,
    }
    return tables.get(kind, {}).get(value, "secondary")


def badge_markdown(kind: str, value: str) -> str:
    """Streamlit coloured-text markdown for a status badge."""
    color = BADGE_COLORS[badge_variant(kind, value)]
    return f":{color}-background[{value}]"


def inventory_summary(items: Sequence[InventoryItem]) -> dict:
    """Headline numbers for the inventory analytics tab."""
    return {
        "total_items": len(items),
        "total_units": sum(i.quantity for i in items),
        "cost_value": sum(i.quantity * i.cost for i in items),
        "retail_value": sum(i.quantity * i.price for i in items),
        "low_stock": sum(1 for i in items if i.status == STOCK_LOW),
        "out_of_stock": sum(1 for i in items if i.status == STOCK_OUT),
    }


def value_by_category(items: Sequence[InventoryItem]) -> pd.DataFrame:
    """Retail stock value per category, largest first."""
    df = inventory_frame(items)
    if df.empty:
        return pd.DataFrame(columns=["category", "value"])
    df["value"] = df["quantity"] * df["price"]
    grouped = df.groupby("category", as_index=False)["value"].sum()
    return grouped.sort_values("value", ascending=False).reset_index(drop=True)


def margin_table(items: Sequence[InventoryItem]) -> pd.DataFrame:
    """Per-item cost, price and margin, best margin first."""
    rows = [
        {
            "Name": i.name,
            "Category": i.category,
            "Cost": i.cost,
            "Price": i.price,
            "Margin (%)": round(profit_margin(i.cost, i.price), 1),
        }
        for i in items
    ]
    df = pd.DataFrame(rows, columns=["Name", "Category", "Cost", "Price", "Margin (%)"])
    return df.sort_values("Margin (%)", ascending=False).reset_index(drop=True)


def sales_window(series: Sequence[dict], date_range: str) -> List[dict]:
    """Slice of the monthly sales series shown for a dashboard date range."""
    size = {"month": 1, "quarter": 3}.get(date_range, 12)
    return list(series[:size])


def paginate(rows: Sequence[T], page: int, per_page: int = None) -> Tuple[List[T], int]:
    """Return (rows on `page`, total pages). Pages are 1-based and clamped."""
    per_page = per_page or config.TRANSACTIONS_PER_PAGE
    total_pages = max(1, math.ceil(len(rows) / per_page))
    page = min(max(1, page), total_pages)
    start = (page - 1) * per_page
    return list(rows[start:start + per_page]), total_pages


def format_currency(amount: float) -> str:
    return f"${amount:,.2f}"


def format_date(value: str, with_time: bool = False) -> str:
    """Render an ISO date like 'Jun 15, 2023' (optionally with time)."""
    dt = pd.to_datetime(value, errors="coerce")
    if pd.isna(dt):
        return "" if value is None else str(value)
    return dt.strftime("%b %d, %Y %I:%M %p" if with_time else "%b %d, %Y")


# ---------- tables ----------

def records_frame(records: Iterable, columns: Sequence[Tuple[str, str]]) -> pd.DataFrame:
    """DataFrame of dataclass records with friendly headers."""
    attrs = [a for a, _ in columns]
    df = pd.DataFrame([asdict(r) for r in records])
    for a in attrs:
        if a not in df.columns:
            df[a] = ""
    return df[attrs].rename(columns=dict(columns))


def inventory_frame(items: Iterable[InventoryItem]) -> pd.DataFrame:
    """Raw (attribute-named) DataFrame of inventory items."""
    df = pd.DataFrame([asdict(i) for i in items])
    if df.empty:
        return pd.DataFrame(columns=[a for a, _ in INVENTORY_COLUMNS])
    return df


# ---------- import / export ----------

def _style_sheet(ws, display_name: str, n_cols: int, n_rows: int, headers: Sequence[str]) -> None:
    if not n_cols:
        return
    last_col = get_column_letter(n_cols)
    table = XlTable(displayName=display_name, ref=f"A1:{last_col}{max(n_rows, 2)}")
    table.tableStyleInfo = XlTableStyleInfo(
        name="TableStyleMedium9",
        showFirstColumn=False,
        showLastColumn=False,
        showRowStripes=True,
        showColumnStripes=False,
    )
    ws.add_table(table)
    for idx, col_name in enumerate(headers, start=1):
        ws.column_dimensions[get_column_letter(idx)].width = max(12, len(str(col_name)) + 2)


def export_excel(items: Sequence[InventoryItem]) -> bytes:
    """Inventory as an .xlsx workbook with a styled table."""
    export_df = records_frame(items, INVENTORY_COLUMNS)
    buf = BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        export_df.to_excel(writer, index=False, sheet_name="inventory")
        _style_sheet(
            writer.sheets["inventory"],
            "InventoryExport",
            len(export_df.columns),
            len(export_df) + 1,
            list(export_df.columns),
        )
    return buf.getvalue()


def excel_template() -> bytes:
    """Empty workbook with the import headers."""
    headers = [h for _, h in INVENTORY_COLUMNS if h != "Status"]
    template_df = pd.DataFrame([[""] * len(headers)], columns=headers)
    buf = BytesIO()
    with pd.ExcelWriter(buf, engine="openpyxl") as writer:
        template_df.to_excel(writer, index=False, sheet_name="inventory")
        _style_sheet(writer.sheets["inventory"], "InventoryTemplate", len(headers), 2, headers)
    return buf.getvalue()


def export_pdf(items: Sequence[InventoryItem], title: Optional[str] = None) -> bytes:
    """Inventory as a landscape PDF table."""
    export_df = records_frame(items, INVENTORY_COLUMNS)
    buf = BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=landscape(letter), title=title or config.APP_TITLE)
    data = [list(export_df.columns)] + export_df.fillna("").astype(str).values.tolist()
    table = Table(data)
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
                ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                ("FONTSIZE", (0, 0), (-1, -1), 8),
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ]
        )
    )
    doc.build([table])
    return buf.getvalue()


def normalize_import_frame(import_df: pd.DataFrame) -> pd.DataFrame:
    """Rename friendly headers to item attributes and drop unknown columns."""
    renamed = {}
    for col in import_df.columns:
        attr = IMPORT_HEADER_MAP.get(str(col).lower().strip())
        # First matching header wins when aliases repeat (e.g. Quantity and Stock)
        if attr and attr not in renamed.values():
            renamed[col] = attr
    df = import_df[list(renamed)].rename(columns=renamed)
    return df.astype(object).fillna("")


def rows_to_items(
    import_df: pd.DataFrame,
    existing: Sequence[InventoryItem],
    new_id,
) -> Tuple[List[InventoryItem], dict]:
    """Turn imported rows into items, matching existing ones by SKU.

    Returns (items to save, counts). Rows without a name are skipped;
    invalid numbers become 0. `new_id` is called for each new item. A SKU
    repeated within the file yields one item: later rows overwrite the
    earlier one and are counted as duplicates.
    """
    df = normalize_import_frame(import_df)
    by_sku = {i.sku.strip().lower(): i for i in existing if i.sku}
    to_save: List[InventoryItem] = []
    counts = {"added": 0, "updated": 0, "skipped": 0, "duplicates": 0}
    # sku (lower-case) -> position in to_save
    seen = {}

    for _, row in df.iterrows():
        name = str(row.get("name", "")).strip()
        if not name:
            counts["skipped"] += 1
            continue
        sku = str(row.get("sku", "")).strip()
        fields = {
            "name": name,
            "category": str(row.get("category", "")).strip() or DEFAULT_CATEGORY,
            "sub_category": str(row.get("sub_category", "")).strip() or DEFAULT_SUBCATEGORY,
            "quantity": to_int(row.get("quantity")),
            "cost": to_number(row.get("cost")),
            "price": to_number(row.get("price")),
            "supplier": str(row.get("supplier", "")).strip(),
            "description": str(row.get("description", "")).strip(),
        }
        if "reorder_point" in df.columns and str(row.get("reorder_point", "")).strip():
            fields["reorder_point"] = to_int(row.get("reorder_point"))

        key = sku.lower()
        if key and key in seen:
            pos = seen[key]
            to_save[pos] = with_derived_status(replace(to_save[pos], **fields))
            counts["duplicates"] += 1
            continue

        current = by_sku.get(key) if key else None
        if current is not None:
            seen[key] = len(to_save)
            to_save.append(with_derived_status(replace(current, **fields)))
            counts["updated"] += 1
        else:
            fields.setdefault("reorder_point", config.LOW_STOCK_THRESHOLD)
            item = InventoryItem(
                id=new_id(),
                sku=sku or f"SKU-{int(datetime.now().timestamp() * 1000)}-{counts['added']}",
                **fields,
            )
            seen[item.sku.lower()] = len(to_save)
            to_save.append(with_derived_status(item))
            counts["added"] += 1
    return to_save, counts
