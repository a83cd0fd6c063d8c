import threading

import pytest
import streamlit as st

from core.checkout import CheckoutTask
from core.store import AddToCart
from page_modules import pos as pos_page

CHECKOUT_KEYS = ("pos_checkout", "pos_checkout_open", "pos_receipt_applied", "pos_last_receipt")


@pytest.fixture(autouse=True)
def clean_checkout_state():
    yield
    for key in CHECKOUT_KEYS:
        st.session_state.pop(key, None)


def _open_checkout(store, **delays):
    paid = threading.Event()
    task = CheckoutTask(store.state.cart, "card", on_complete=lambda r: paid.set(), **delays).start()
    st.session_state.pos_checkout_open = True
    st.session_state.pos_checkout = task
    return task, paid


def test_closing_after_payment_still_records_sale(store, widget):
    store.dispatch(AddToCart(widget))
    task, paid = _open_checkout(store, processing_seconds=0.01, success_seconds=30)
    assert paid.wait(timeout=5)

    pos_page.close_checkout(store)

    assert store.state.sales == (task.receipt,)
    assert store.state.cart == ()
    assert "pos_checkout" not in st.session_state
    assert st.session_state.pos_last_receipt == task.receipt


def test_receipt_is_applied_only_once(store, widget):
    store.dispatch(AddToCart(widget))
    task, paid = _open_checkout(store, processing_seconds=0.01, success_seconds=0.01)
    assert paid.wait(timeout=5)
    assert task.wait(timeout=5)

    pos_page._apply_receipt(store, task)
    pos_page.close_checkout(store)

    assert store.state.sales == (task.receipt,)


def test_closing_during_processing_keeps_cart(store, widget):
    store.dispatch(AddToCart(widget))
    task, paid = _open_checkout(store, processing_seconds=30, success_seconds=0.01)

    pos_page.close_checkout(store)

    assert task.wait(timeout=5)
    assert not paid.is_set()
    assert task.receipt is None
    assert store.state.sales == ()
    assert len(store.state.cart) == 1
