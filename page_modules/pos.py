"""Point-of-sale page: product catalog, cart and checkout."""
import logging

import streamlit as st

from core import config
from core import pos as cart_ops
from core.checkout import CANCELLED, ERROR, IDLE, PROCESSING, SUCCESS, CheckoutTask
from core.constants import ALL, PAYMENT_METHODS, POS_CATEGORIES
from core.services import filter_products, find_by_barcode, format_currency, format_date, to_number
from core.store import AddToCart, ClearCart, CompleteSale, RemoveFromCart, Store, UpdateQuantity

logger = logging.getLogger(__name__)

# Catalog tabs show fixed slices of the filtered list
CATALOG_TABS = {
    "All Products": slice(None),
    "Popular": slice(0, 8),
    "Recently Added": slice(4, 12),
    "Discounted": slice(2, 6),
}


def _apply_receipt(store: Store, task):
    """Record a succeeded payment in the store, once per task."""
    receipt = task.receipt
    if receipt is None or st.session_state.get("pos_receipt_applied"):
        return
    store.dispatch(CompleteSale(receipt))
    st.session_state.pos_receipt_applied = True
    st.session_state.pos_last_receipt = receipt


def close_checkout(store: Store):
    """Dispose of the checkout panel, aborting a payment still in flight.

    A payment that already succeeded is still recorded.
    """
    task = st.session_state.get("pos_checkout")
    if task is not None:
        if not task.finished:
            task.cancel()
        # cancel() leaves a succeeded task alone, so its receipt is final here
        _apply_receipt(store, task)
    st.session_state.pop("pos_checkout", None)
    st.session_state.pop("pos_checkout_open", None)
    st.session_state.pop("pos_receipt_applied", None)


def _render_product_grid(store: Store, products, view_mode: str, key: str):
    if not products:
        st.info("No products found")
        return
    if view_mode == "list":
        for product in products:
            col1, col2, col3, col4 = st.columns([4, 2, 2, 1])
            col1.write(f"**{product.name}**")
            col2.caption(product.category)
            col3.write(format_currency(product.price))
            if col4.button("➕", key=f"{key}_add_{product.id}", help="Add to cart"):
                store.dispatch(AddToCart(product))
                st.rerun()
        return

    cols = st.columns(4)
    for idx, product in enumerate(products):
        with cols[idx % 4]:
            with st.container(border=True):
                if product.image:
                    st.image(product.image, width="stretch")
                st.markdown(f"**{product.name}**")
                st.caption(f"{product.category} · {product.stock} in stock")
                st.write(format_currency(product.price))
                if st.button("Add to cart", key=f"{key}_add_{product.id}", width="stretch"):
                    store.dispatch(AddToCart(product))
                    st.rerun()


def _render_catalog(store: Store):
    col1, col2, col3 = st.columns([3, 2, 1])
    query = col1.text_input("Search products", key="pos_search")
    category = col2.selectbox(
        "Category",
        [ALL] + POS_CATEGORIES,
        format_func=lambda c: "All Categories" if c == ALL else c,
        key="pos_category",
    )
    view_mode = col3.radio("View", ["grid", "list"], horizontal=True, key="pos_view")

    with st.form("pos_barcode_form", clear_on_submit=True):
        bcol1, bcol2 = st.columns([4, 1])
        barcode = bcol1.text_input("Barcode", placeholder="Scan or type a barcode", label_visibility="collapsed")
        if bcol2.form_submit_button("Add by barcode"):
            product = find_by_barcode(store.state.products, barcode)
            if product is None:
                st.warning(f"No product with barcode {barcode}")
            else:
                store.dispatch(AddToCart(product))
                st.toast(f"Added {product.name}", icon="\U0001F6D2")

    products = filter_products(store.state.products, query.strip(), category)
    tabs = st.tabs(list(CATALOG_TABS))
    for tab, (label, window) in zip(tabs, CATALOG_TABS.items()):
        with tab:
            _render_product_grid(store, products[window], view_mode, key=f"pos_{label}")


def _render_cart(store: Store):
    cart = store.state.cart
    st.subheader("\U0001F6D2 Shopping Cart")
    if not cart:
        st.info("Cart is empty")
    for line in cart:
        col1, col2, col3 = st.columns([4, 2, 1])
        col1.write(f"**{line.product.name}**")
        col1.caption(f"{format_currency(line.product.price)} each · {format_currency(line.line_total)}")
        qty = col2.number_input(
            "Qty",
            min_value=0,
            value=line.quantity,
            step=1,
            key=f"pos_qty_{line.product.id}_{line.quantity}",
            label_visibility="collapsed",
        )
        if qty != line.quantity:
            store.dispatch(UpdateQuantity(line.product.id, int(qty)))
            st.rerun()
        if col3.button("✖", key=f"pos_remove_{line.product.id}", help="Remove"):
            store.dispatch(RemoveFromCart(line.product.id))
            st.rerun()

    st.markdown("---")
    st.write(f"Subtotal: **{format_currency(cart_ops.subtotal(cart))}**")
    st.write(f"Tax ({config.TAX_RATE:.0%}): **{format_currency(cart_ops.tax(cart))}**")
    st.markdown(f"### Total: {format_currency(cart_ops.total(cart))}")

    col1, col2 = st.columns(2)
    if col1.button("Clear", disabled=not cart, width="stretch"):
        store.dispatch(ClearCart())
        st.rerun()
    if col2.button("\U0001F4B3 Checkout", type="primary", disabled=not cart, width="stretch"):
        st.session_state.pos_checkout_open = True
        st.rerun()


@st.fragment(run_every=0.5)
def _checkout_progress(store: Store):
    """Poll the payment task; applies the receipt once and closes when done."""
    task = st.session_state.get("pos_checkout")
    if task is None:
        return
    _apply_receipt(store, task)

    state = task.state
    if state == PROCESSING:
        st.info("⏳ Processing payment...")
    elif state == SUCCESS:
        st.success("✅ Payment Successful!")
    elif state == ERROR:
        st.error("Payment Failed")
    elif state == CANCELLED:
        st.warning("Payment cancelled")
    if task.finished and state in (IDLE, CANCELLED):
        close_checkout(store)
        st.rerun(scope="app")


def _render_checkout(store: Store):
    cart = store.state.cart
    task = st.session_state.get("pos_checkout")
    with st.container(border=True):
        st.subheader("Checkout")
        st.caption("Complete your purchase by selecting a payment method below.")
        # Once payment starts the cart may be cleared; show the snapshot being paid
        lines = task.cart if task is not None else cart
        amount_due = cart_ops.total(lines)
        st.write(f"Subtotal: {format_currency(cart_ops.subtotal(lines))}")
        st.write(f"Tax ({config.TAX_RATE:.0%}): {format_currency(cart_ops.tax(lines))}")
        st.markdown(f"**Total: {format_currency(amount_due)}**")

        busy = task is not None
        method = st.radio(
            "Payment method",
            list(PAYMENT_METHODS),
            format_func=PAYMENT_METHODS.get,
            horizontal=True,
            disabled=busy,
            key="pos_payment_method",
        )
        if method == "card":
            st.text_input("Card Number", placeholder="4242 4242 4242 4242", disabled=busy, key="pos_card_number")
            c1, c2 = st.columns(2)
            c1.text_input("Expiry Date", placeholder="MM/YY", disabled=busy, key="pos_card_expiry")
            c2.text_input("CVC", placeholder="123", disabled=busy, key="pos_card_cvc")
        elif method == "cash":
            tendered = to_number(st.text_input("Cash Amount", placeholder="Enter amount received",
                                               disabled=busy, key="pos_cash_amount"))
            if tendered > amount_due:
                st.caption(f"Change: {format_currency(cart_ops.change_due(amount_due, tendered))}")
        else:
            st.info("Scan the QR code on the customer's device or have them scan your POS terminal QR code.")

        col1, col2 = st.columns(2)
        if col1.button("Cancel", width="stretch", key="pos_checkout_cancel"):
            close_checkout(store)
            st.rerun()
        if col2.button("Complete Payment", type="primary", disabled=busy or not cart,
                       width="stretch", key="pos_checkout_pay"):
            st.session_state.pos_checkout = CheckoutTask(cart, method).start()
            st.rerun()

        if busy:
            _checkout_progress(store)


def _render_last_receipt():
    receipt = st.session_state.get("pos_last_receipt")
    if receipt is None:
        return
    with st.expander(f"\U0001F9FE Last receipt {receipt.transaction_id}", expanded=True):
        st.caption(format_date(receipt.date, with_time=True))
        for line in receipt.items:
            st.write(f"{line.quantity} × {line.product.name}: {format_currency(line.line_total)}")
        st.write(f"Subtotal {format_currency(receipt.subtotal)} · Tax {format_currency(receipt.tax)}")
        st.markdown(f"**Paid {format_currency(receipt.amount)} by {PAYMENT_METHODS.get(receipt.payment_method)}**")


def render(store: Store):
    """Render the point-of-sale page."""
    st.header("\U0001F6D2 Point of Sale")
    col1, col2 = st.columns([3, 2])
    with col1:
        _render_catalog(store)
    with col2:
        if st.session_state.get("pos_checkout_open"):
            _render_checkout(store)
        else:
            _render_cart(store)
        _render_last_receipt()
