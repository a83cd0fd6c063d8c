"""Point-of-sale cart operations. A cart is an ordered tuple of CartItem lines."""
from dataclasses import replace
from typing import Sequence, Tuple

from core import config
from core.models import CartItem, Product

Cart = Tuple[CartItem, ...]


def add_to_cart(cart: Sequence[CartItem], product: Product) -> Cart:
    """Add one unit; an existing line for the same product id is incremented."""
    if any(line.product.id == product.id for line in cart):
        return tuple(
            replace(line, quantity=line.quantity + 1) if line.product.id == product.id else line
            for line in cart
        )
    return tuple(cart) + (CartItem(product=product, quantity=1),)


def remove_from_cart(cart: Sequence[CartItem], product_id: str) -> Cart:
    return tuple(line for line in cart if line.product.id != product_id)


def update_quantity(cart: Sequence[CartItem], product_id: str, quantity: int) -> Cart:
    """Set a line's quantity; zero or less removes the line."""
    if quantity <= 0:
        return remove_from_cart(cart, product_id)
    return tuple(
        replace(line, quantity=quantity) if line.product.id == product_id else line
        for line in cart
    )


def clear_cart(cart: Sequence[CartItem] = ()) -> Cart:
    return ()


def item_count(cart: Sequence[CartItem]) -> int:
    return sum(line.quantity for line in cart)


def subtotal(cart: Sequence[CartItem]) -> float:
    return sum(line.product.price * line.quantity for line in cart)


def tax(cart: Sequence[CartItem], rate: float = None) -> float:
    rate = config.TAX_RATE if rate is None else rate
    return subtotal(cart) * rate


def total(cart: Sequence[CartItem], rate: float = None) -> float:
    return subtotal(cart) + tax(cart, rate)


def change_due(amount_due: float, tendered: float) -> float:
    """Cash change owed to the customer, never negative."""
    return max(0.0, tendered - amount_due)
