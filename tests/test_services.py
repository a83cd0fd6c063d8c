import math

import pytest

from core import mock_data
from core.constants import (
    ALL,
    CUSTOMER_TABS,
    CUSTOMER_TYPES,
    ORDER_STATUSES,
    ORDER_TABS,
    STOCK_IN,
    STOCK_LOW,
    STOCK_OUT,
)
from core.models import Category
from core.services import (
    badge_markdown,
    badge_variant,
    filter_customers,
    filter_inventory,
    filter_orders,
    filter_products,
    filter_subcategories,
    filter_suppliers,
    find_by_barcode,
    format_currency,
    format_date,
    inventory_summary,
    margin_table,
    matches_query,
    paginate,
    profit_margin,
    sales_window,
    stock_status,
    to_int,
    to_number,
    toggle_category,
    value_by_category,
)


def test_query_matches_name_substring_case_insensitively(sample_items):
    headphones = sample_items[0]
    assert matches_query(headphones, "phone")
    assert matches_query(headphones, "WIRELESS")
    assert matches_query(headphones, "sku-a")
    assert matches_query(headphones, "audio")
    assert not matches_query(headphones, "speaker")


def test_empty_query_matches_everything(sample_items):
    assert filter_inventory(sample_items, "") == sample_items


def test_filter_inventory_by_category_and_sub_category(sample_items):
    assert [i.id for i in filter_inventory(sample_items, category="Accessories")] == ["b"]
    assert [i.id for i in filter_inventory(sample_items, "", ALL, "Lighting")] == ["c"]
    assert filter_inventory(sample_items, "lamp", "Electronics") == []


@pytest.mark.parametrize(
    "quantity, expected",
    [(0, STOCK_OUT), (-1, STOCK_OUT), (3, STOCK_LOW), (5, STOCK_LOW), (6, STOCK_IN), (10, STOCK_IN)],
)
def test_stock_status_against_threshold(quantity, expected):
    assert stock_status(quantity, 5) == expected


def test_profit_margin():
    assert profit_margin(50, 100) == pytest.approx(50.0)
    assert profit_margin(120, 100) == pytest.approx(-20.0)
    assert profit_margin(10, 0) == 0.0


@pytest.mark.parametrize(
    "raw, expected",
    [("12", 12.0), (" 3.5 ", 3.5), ("1,250.75", 1250.75), ("abc", 0.0), ("", 0.0), (None, 0.0),
     (float("nan"), 0.0), ("inf", 0.0), (7, 7.0)],
)
def test_to_number(raw, expected):
    assert to_number(raw) == expected


def test_to_int_truncates():
    assert to_int("4.9") == 4
    assert to_int("oops") == 0


def test_paginate():
    rows = list(range(12))
    page, total = paginate(rows, 1)
    assert page == [0, 1, 2, 3, 4]
    assert total == 3

    assert paginate(rows, 3) == ([10, 11], 3)
    # Out-of-range pages are clamped
    assert paginate(rows, 99)[0] == [10, 11]
    assert paginate(rows, 0)[0] == [0, 1, 2, 3, 4]
    assert paginate([], 1) == ([], 1)


def test_sales_window_sizes():
    assert len(sales_window(mock_data.SALES_SERIES, "month")) == 1
    assert len(sales_window(mock_data.SALES_SERIES, "quarter")) == 3
    assert len(sales_window(mock_data.SALES_SERIES, "year")) == 12


def test_order_tabs():
    orders = mock_data.ORDERS
    assert len(filter_orders(orders, "", ALL)) == 8
    assert [o.id for o in filter_orders(orders, "", "cancelled")] == ["ORD-004", "ORD-005"]
    assert [o.id for o in filter_orders(orders, "", "pending")] == ["ORD-007"]
    assert [o.id for o in filter_orders(orders, "jane", ALL)] == ["ORD-002"]
    assert [o.id for o in filter_orders(orders, "ord-003", ALL)] == ["ORD-003"]


def test_customer_tabs():
    customers = mock_data.CUSTOMERS
    assert [c.id for c in filter_customers(customers, "", "vip")] == ["C001", "C003", "C006"]
    assert [c.id for c in filter_customers(customers, "", "inactive")] == ["C004"]
    assert [c.id for c in filter_customers(customers, "", "new")] == ["C005"]
    assert [c.id for c in filter_customers(customers, "robert.j@", ALL)] == ["C003"]


def test_supplier_tabs():
    suppliers = mock_data.SUPPLIERS
    assert [s.id for s in filter_suppliers(suppliers, "", "inactive")] == ["SUP-004"]
    assert [s.id for s in filter_suppliers(suppliers, "", "audio")] == ["SUP-003"]
    assert [s.id for s in filter_suppliers(suppliers, "", "other")] == ["SUP-004"]
    assert len(filter_suppliers(suppliers, "", "electronics")) == 5
    assert [s.id for s in filter_suppliers(suppliers, "jessica", ALL)] == ["SUP-006"]


def test_products_and_barcode():
    products = mock_data.POS_PRODUCTS
    assert [p.id for p in filter_products(products, "mug", ALL)] == ["7"]
    assert len(filter_products(products, "", "Clothing")) == 2
    assert find_by_barcode(products, " 8901234567891 ").name == "Smart Watch"
    assert find_by_barcode(products, "") is None
    assert find_by_barcode(products, "0000") is None


def test_subcategory_filter_by_parent():
    rows = filter_subcategories(mock_data.SUBCATEGORIES, "", "Accessories")
    assert [s.name for s in rows] == ["Computer Accessories"]


def test_toggle_category_flips_only_named():
    cats = [Category("A", 1, 10.0), Category("B", 2, 20.0)]
    toggled = toggle_category(cats, "B")
    assert [c.expanded for c in toggled] == [False, True]


def test_badges():
    assert badge_variant("order", "cancelled") == "destructive"
    assert badge_variant("order", "mystery") == "secondary"
    assert badge_markdown("stock", STOCK_OUT) == f":red-background[{STOCK_OUT}]"


def test_inventory_summary(sample_items):
    summary = inventory_summary(sample_items)
    assert summary["total_items"] == 3
    assert summary["total_units"] == 48
    assert summary["retail_value"] == pytest.approx(45 * 79.99 + 3 * 20.0)


def test_value_by_category_largest_first(sample_items):
    df = value_by_category(sample_items)
    assert list(df["category"]) == ["Electronics", "Home", "Accessories"]
    assert value_by_category([]).empty


def test_margin_table_sorted(sample_items):
    df = margin_table(sample_items)
    assert df["Margin (%)"].is_monotonic_decreasing
    assert not math.isnan(df["Margin (%)"].iloc[0])


def test_formatting():
    assert format_currency(1234.5) == "$1,234.50"
    assert format_date("2023-06-15T14:30:00") == "Jun 15, 2023"
    assert format_date("2023-06-15T14:30:00", with_time=True) == "Jun 15, 2023 02:30 PM"
    assert format_date("not a date") == "not a date"


def test_tab_lists_follow_status_enumerations():
    assert ORDER_TABS == [ALL, "pending", "processing", "shipped", "delivered", "cancelled"]
    assert set(ORDER_STATUSES) - set(ORDER_TABS) == {"returned"}
    assert CUSTOMER_TABS == [ALL] + CUSTOMER_TYPES + ["inactive"]
