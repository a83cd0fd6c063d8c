"""Inventory + POS Admin - Main Application Entry Point."""
import logging

import streamlit as st

from core import config
from core.router import (
    ANALYTICS,
    CUSTOMERS,
    DASHBOARD,
    INVENTORY,
    ORDERS,
    POS,
    SETTINGS,
    SUPPLIERS,
    PathRouter,
    normalize_path,
)
from core.store import Navigate, Store
from ui.components import placeholder_view
from ui.sidebar import render_sidebar_menu
from ui.styles import apply_styles

# Import page render functions
from page_modules import analytics, customers, dashboard, inventory, orders, pos, settings, suppliers

# Page configuration
st.set_page_config(
    page_title=config.APP_TITLE,
    page_icon="\U0001F4B3",
    layout="wide",
)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# One store per browser session
if "store" not in st.session_state:
    st.session_state.store = Store()
    logger.info("New dashboard session")
store: Store = st.session_state.store
router = PathRouter()

# The ?page= query parameter is the browser-visible path
requested = st.query_params.get("page", "/")
if normalize_path(requested) != store.state.path:
    store.dispatch(Navigate(requested))

apply_styles(store.state.sidebar_collapsed)
render_sidebar_menu(store, router)

# Page routing
pages = {
    DASHBOARD: dashboard.render,
    INVENTORY: inventory.render,
    POS: pos.render,
    ANALYTICS: analytics.render,
    CUSTOMERS: customers.render,
    ORDERS: orders.render,
    SUPPLIERS: suppliers.render,
    SETTINGS: settings.render,
}

module = router.resolve(store.state.path)
# Leaving the POS page disposes of an open checkout
if module != POS and "pos_checkout_open" in st.session_state:
    pos.close_checkout(store)

if module is None:
    placeholder_view(store.state.path)
else:
    pages[module](store)
