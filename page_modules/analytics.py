"""Analytics page: KPIs and charts over the sample sales data."""
import streamlit as st

from core import mock_data
from core.constants import ANALYTICS_DATE_RANGES
from core.store import Store
from ui.charts import charts
from ui.components import render_kpi_cards

SALES_LABELS = {"name": "Month", "value": "Amount ($)", "variable": ""}


def _render_overview():
    col1, col2 = st.columns(2)
    with col1:
        charts.render(mock_data.MONTHLY_SALES, "line", y=["sales", "profit"],
                      title="Revenue & Profit Trends", labels=SALES_LABELS)
    with col2:
        charts.render(mock_data.CATEGORY_VALUES, "pie", title="Sales by Category")
    charts.render(mock_data.MONTHLY_SALES, "bar", y="sales",
                  title="Monthly Sales Performance", labels={"name": "Month", "sales": "Sales ($)"})


def render(store: Store):
    """Render the analytics page."""
    col1, col2 = st.columns([3, 1])
    col1.header("\U0001F4CA Analytics")
    # Ranges only relabel the view; the sample series are fixed
    date_range = col2.selectbox(
        "Date range",
        list(ANALYTICS_DATE_RANGES),
        index=list(ANALYTICS_DATE_RANGES).index("month"),
        format_func=ANALYTICS_DATE_RANGES.get,
        key="analytics_range",
    )
    st.caption(f"Showing {ANALYTICS_DATE_RANGES[date_range].lower()}")

    overview_tab, sales_tab, inventory_tab, customers_tab = st.tabs(
        ["Overview", "Sales", "Inventory", "Customers"]
    )
    with overview_tab:
        render_kpi_cards(mock_data.ANALYTICS_KPIS)
        _render_overview()
    with sales_tab:
        charts.render(mock_data.MONTHLY_SALES, "bar", y=["sales", "profit"],
                      title="Sales Analytics", labels=SALES_LABELS)
    with inventory_tab:
        charts.render(mock_data.CATEGORY_VALUES, "pie", title="Inventory Analytics")
    with customers_tab:
        charts.render(mock_data.CUSTOMER_SEGMENTS, "pie", title="Customer Analytics")
