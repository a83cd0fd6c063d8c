import random
import re
import threading

import pytest

from core import pos
from core.checkout import CANCELLED, IDLE, CheckoutTask, make_receipt


@pytest.fixture
def cart(widget, gadget):
    return pos.add_to_cart(pos.add_to_cart(pos.add_to_cart((), widget), widget), gadget)


def test_make_receipt(cart):
    receipt = make_receipt(cart, "card", rng=random.Random(7))

    assert re.fullmatch(r"TRX-\d{1,6}", receipt.transaction_id)
    assert receipt.amount == pytest.approx(27.50)
    assert receipt.subtotal == pytest.approx(25.00)
    assert receipt.tax == pytest.approx(2.50)
    assert receipt.status == "completed"
    assert receipt.items == cart


def test_successful_checkout_produces_receipt_and_resets(cart):
    completed = []
    task = CheckoutTask(cart, "cash", on_complete=completed.append,
                        processing_seconds=0.01, success_seconds=0.01).start()

    assert task.wait(timeout=5)
    assert task.receipt is not None
    assert task.receipt.payment_method == "cash"
    assert task.state == IDLE
    assert completed == [task.receipt]


def test_cancel_during_processing_gives_no_receipt(cart):
    completed = []
    task = CheckoutTask(cart, "card", on_complete=completed.append,
                        processing_seconds=30, success_seconds=0.01).start()

    assert task.cancel() is True
    assert task.wait(timeout=5)
    assert task.state == CANCELLED
    assert task.receipt is None
    assert completed == []


def test_cancel_after_success_keeps_receipt(cart):
    paid = threading.Event()
    task = CheckoutTask(cart, "wallet", on_complete=lambda r: paid.set(),
                        processing_seconds=0.01, success_seconds=30).start()

    assert paid.wait(timeout=5)
    assert task.cancel() is False
    assert task.wait(timeout=5)
    assert task.receipt is not None


def test_cannot_start_twice(cart):
    task = CheckoutTask(cart, processing_seconds=0.01, success_seconds=0.01).start()
    with pytest.raises(RuntimeError):
        task.start()
    task.wait(timeout=5)


def test_rejects_empty_cart():
    with pytest.raises(ValueError):
        CheckoutTask((), "card")


def test_rejects_unknown_payment_method(cart):
    with pytest.raises(ValueError):
        CheckoutTask(cart, "cheque")
