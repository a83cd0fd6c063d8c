import pytest

from core import pos


def test_totals_for_two_lines(widget, gadget):
    cart = pos.add_to_cart((), widget)
    cart = pos.add_to_cart(cart, widget)
    cart = pos.add_to_cart(cart, gadget)

    assert pos.subtotal(cart) == pytest.approx(25.00)
    assert pos.tax(cart) == pytest.approx(2.50)
    assert pos.total(cart) == pytest.approx(27.50)


def test_adding_same_product_increments_line(widget):
    cart = pos.add_to_cart((), widget)
    cart = pos.add_to_cart(cart, widget)

    assert len(cart) == 1
    assert cart[0].quantity == 2
    assert pos.item_count(cart) == 2


def test_add_keeps_line_order(widget, gadget):
    cart = pos.add_to_cart(pos.add_to_cart((), widget), gadget)
    cart = pos.add_to_cart(cart, widget)

    assert [line.product.id for line in cart] == ["p1", "p2"]


def test_update_quantity_sets_value(widget, gadget):
    cart = pos.add_to_cart(pos.add_to_cart((), widget), gadget)
    cart = pos.update_quantity(cart, "p2", 4)

    assert cart[1].quantity == 4
    assert pos.subtotal(cart) == pytest.approx(30.00)


@pytest.mark.parametrize("quantity", [0, -2])
def test_update_quantity_to_zero_or_less_removes_line(widget, gadget, quantity):
    cart = pos.add_to_cart(pos.add_to_cart((), widget), gadget)
    cart = pos.update_quantity(cart, "p1", quantity)

    assert [line.product.id for line in cart] == ["p2"]


def test_remove_and_clear(widget, gadget):
    cart = pos.add_to_cart(pos.add_to_cart((), widget), gadget)

    assert [line.product.id for line in pos.remove_from_cart(cart, "p1")] == ["p2"]
    assert pos.remove_from_cart(cart, "missing") == cart
    assert pos.clear_cart(cart) == ()


def test_empty_cart_totals_are_zero():
    assert pos.subtotal(()) == 0
    assert pos.total(()) == 0


def test_explicit_tax_rate(widget):
    cart = pos.add_to_cart((), widget)
    assert pos.total(cart, rate=0.2) == pytest.approx(12.00)


def test_change_due_never_negative():
    assert pos.change_due(27.50, 30) == pytest.approx(2.50)
    assert pos.change_due(27.50, 20) == 0.0
