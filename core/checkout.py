"""Simulated card/cash/wallet payment with an abort signal.

A CheckoutTask runs on a daemon worker thread and walks
idle -> processing -> success -> idle, holding processing and success for
their configured delays. `cancel()` sets the abort event; a task cancelled
before success ends in `cancelled` and never produces a receipt.
"""
import logging
import random
import threading
from datetime import datetime
from typing import Callable, Optional, Sequence

from core import config, pos
from core.constants import PAYMENT_METHODS
from core.models import CartItem, Receipt

logger = logging.getLogger(__name__)

IDLE = "idle"
PROCESSING = "processing"
SUCCESS = "success"
CANCELLED = "cancelled"
ERROR = "error"


def make_receipt(
    cart: Sequence[CartItem],
    payment_method: str,
    rate: float = None,
    rng: random.Random = None,
) -> Receipt:
    """Build a completed-sale receipt for the cart's current total."""
    rng = rng or random
    return Receipt(
        transaction_id=f"TRX-{rng.randint(0, 999999)}",
        date=datetime.now().isoformat(),
        amount=round(pos.total(cart, rate), 2),
        payment_method=payment_method,
        status="completed",
        subtotal=round(pos.subtotal(cart), 2),
        tax=round(pos.tax(cart, rate), 2),
        items=tuple(cart),
    )


class CheckoutTask:
    """One payment attempt for a snapshot of the cart.

    Pages poll `state` and `receipt`; `on_complete` is called from the worker
    thread with the receipt, for callers that would rather be notified.
    """

    def __init__(
        self,
        cart: Sequence[CartItem],
        payment_method: str = "card",
        on_complete: Optional[Callable[[Receipt], None]] = None,
        processing_seconds: float = None,
        success_seconds: float = None,
    ):
        if payment_method not in PAYMENT_METHODS:
            raise ValueError(f"Unknown payment method: {payment_method}")
        if not cart:
            raise ValueError("Cannot check out an empty cart")
        self.cart = tuple(cart)
        self.payment_method = payment_method
        self.on_complete = on_complete
        self.processing_seconds = (
            config.CHECKOUT_PROCESSING_SECONDS if processing_seconds is None else processing_seconds
        )
        self.success_seconds = (
            config.CHECKOUT_SUCCESS_SECONDS if success_seconds is None else success_seconds
        )
        self._lock = threading.Lock()
        self._abort = threading.Event()
        self._finished = threading.Event()
        self._state = IDLE
        self._receipt: Optional[Receipt] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def state(self) -> str:
        with self._lock:
            return self._state

    @property
    def receipt(self) -> Optional[Receipt]:
        with self._lock:
            return self._receipt

    @property
    def finished(self) -> bool:
        return self._finished.is_set()

    def start(self) -> "CheckoutTask":
        if self._thread is not None:
            raise RuntimeError("Checkout already started")
        with self._lock:
            self._state = PROCESSING
        self._thread = threading.Thread(target=self._run, name="checkout", daemon=True)
        self._thread.start()
        logger.info("Checkout started: %d line(s), method=%s", len(self.cart), self.payment_method)
        return self

    def cancel(self) -> bool:
        """Signal abort. Returns True if the payment had not yet succeeded."""
        self._abort.set()
        with self._lock:
            if self._receipt is None and self._state in (IDLE, PROCESSING):
                self._state = CANCELLED
                logger.info("Checkout cancelled before completion")
                return True
            return False

    def wait(self, timeout: float = None) -> bool:
        """Block until the task finishes; True if it did within `timeout`."""
        return self._finished.wait(timeout)

    def _run(self) -> None:
        try:
            if self._abort.wait(self.processing_seconds):
                return
            receipt = make_receipt(self.cart, self.payment_method)
            with self._lock:
                if self._abort.is_set():
                    return
                self._state = SUCCESS
                self._receipt = receipt
            logger.info("Payment %s completed: %.2f", receipt.transaction_id, receipt.amount)
            if self.on_complete is not None:
                self.on_complete(receipt)
            # Hold the success state, then reset unless the dialog went away
            self._abort.wait(self.success_seconds)
            with self._lock:
                if self._state == SUCCESS:
                    self._state = IDLE
        except Exception:
            logger.exception("Checkout worker failed")
            with self._lock:
                self._state = ERROR
        finally:
            self._finished.set()
