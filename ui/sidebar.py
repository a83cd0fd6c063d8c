"""Sidebar navigation and the collapse toggle."""
import streamlit as st

from core import config
from core.router import MENU_LABELS, PathRouter
from core.store import Navigate, Store, ToggleSidebar


def _icon(label: str) -> str:
    return label.split(" ", 1)[0]


def render_sidebar_menu(store: Store, router: PathRouter) -> str:
    """Render the module menu; returns the selected module id."""
    state = store.state
    collapsed = state.sidebar_collapsed
    modules = list(MENU_LABELS)

    if not collapsed:
        st.sidebar.title(config.APP_TITLE)
    toggle_label = "»" if collapsed else "« Collapse"
    if st.sidebar.button(toggle_label, key="sidebar_toggle"):
        store.dispatch(ToggleSidebar())
        st.rerun()

    current = router.resolve(state.path)
    shown = current if current in modules else modules[0]
    selected = st.sidebar.radio(
        "Navigation",
        modules,
        index=modules.index(shown),
        format_func=(lambda m: _icon(MENU_LABELS[m])) if collapsed else MENU_LABELS.get,
        label_visibility="collapsed",
        key=f"menu_selection_{state.path}",
    )
    if selected != shown:
        navigate(store, router.path_for(selected))

    if not collapsed:
        st.sidebar.markdown("---")
        cart_lines = len(state.cart)
        st.sidebar.caption(f"\U0001F6D2 {cart_lines} cart line(s) · {len(state.sales)} sale(s) this session")
    return selected


def navigate(store: Store, path: str) -> None:
    """Switch module: update the store and the `?page=` query parameter."""
    store.dispatch(Navigate(path))
    st.query_params["page"] = store.state.path
    st.rerun()
