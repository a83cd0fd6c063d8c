from io import BytesIO
from itertools import count

import pandas as pd
import pytest

from core.constants import STOCK_OUT
from core.services import (
    INVENTORY_COLUMNS,
    excel_template,
    export_excel,
    export_pdf,
    normalize_import_frame,
    rows_to_items,
)


@pytest.fixture
def id_factory():
    ids = count(1)
    return lambda: f"item-{next(ids)}"


def test_excel_export_has_friendly_headers(sample_items):
    df = pd.read_excel(BytesIO(export_excel(sample_items)))

    assert list(df.columns) == [header for _, header in INVENTORY_COLUMNS]
    assert list(df["SKU"]) == ["SKU-A", "SKU-B", "SKU-C"]


def test_exported_workbook_reimports_as_updates(sample_items, id_factory):
    df = pd.read_excel(BytesIO(export_excel(sample_items)))
    items, counts = rows_to_items(df, sample_items, id_factory)

    assert counts == {"added": 0, "updated": 3, "skipped": 0, "duplicates": 0}
    assert [i.id for i in items] == ["a", "b", "c"]
    assert items[1].status == STOCK_OUT


def test_template_has_no_status_column():
    df = pd.read_excel(BytesIO(excel_template()))
    assert "Status" not in df.columns
    assert "Name" in df.columns


def test_import_adds_skips_and_coerces(sample_items, id_factory):
    df = pd.DataFrame(
        [
            {"SKU": "sku-a", "Name": "Headphones v2", "Quantity": "12", "Price": "abc"},
            {"SKU": "", "Name": "", "Quantity": 1},
            {"SKU": "NEW-1", "Name": "Tripod", "Quantity": "2", "Cost": "10", "Price": "25"},
        ]
    )
    items, counts = rows_to_items(df, sample_items, id_factory)

    assert counts == {"added": 1, "updated": 1, "skipped": 1, "duplicates": 0}
    updated, added = items
    assert updated.id == "a"
    assert updated.name == "Headphones v2"
    assert updated.price == 0.0
    assert added.id == "item-1"
    assert added.quantity == 2
    assert added.reorder_point == 5
    assert added.category == "Uncategorized"


def test_normalize_import_frame_drops_unknown_columns():
    df = normalize_import_frame(pd.DataFrame([{"Name": "X", "Colour": "red", "Sub Category": "Y"}]))
    assert list(df.columns) == ["name", "sub_category"]


def test_pdf_export(sample_items):
    data = export_pdf(sample_items)
    assert data.startswith(b"%PDF")


def test_first_alias_header_wins():
    df = normalize_import_frame(pd.DataFrame([{"Quantity": 4, "Stock": 9, "Name": "X"}]))
    assert list(df.columns) == ["quantity", "name"]
    assert df.iloc[0]["quantity"] == 4


def test_repeated_sku_rows_collapse_to_one_item(sample_items, id_factory):
    df = pd.DataFrame(
        [
            {"SKU": "SKU-A", "Name": "Headphones", "Quantity": 10},
            {"SKU": "sku-a", "Name": "Headphones", "Quantity": 20},
            {"SKU": "NEW-9", "Name": "Tripod", "Quantity": 1},
            {"SKU": "NEW-9", "Name": "Tripod XL", "Quantity": 4},
        ]
    )
    items, counts = rows_to_items(df, sample_items, id_factory)

    assert counts == {"added": 1, "updated": 1, "skipped": 0, "duplicates": 2}
    assert [i.sku for i in items] == ["SKU-A", "NEW-9"]
    assert items[0].id == "a"
    assert items[0].quantity == 20
    assert items[1].id == "item-1"
    assert items[1].name == "Tripod XL"
    assert items[1].quantity == 4
