import logging

from config import CheckoutPolicy, SEPARATOR_WIDTH
from console import ConsoleDisplay, ConsoleReporter, SystemClock
from models import (
    AddOutcome,
    CartItem,
    CheckoutResult,
    CheckoutStatus,
    Failure,
    ShippableItem,
)
from services import ShippingService, format_amount, label

logger = logging.getLogger(__name__)


class Cart:
    """Ordered line items plus the checkout computation.

    Failures are never raised: they go to the reporter and come back as an
    `AddOutcome` / `CheckoutResult`. A cart stays open after checkout, so it
    can be added to and checked out again.
    """

    def __init__(self, reporter=None, display=None, clock=None, shipping=None, policy=None):
        self.reporter = reporter or ConsoleReporter()
        self.display = display or ConsoleDisplay()
        self.clock = clock or SystemClock()
        self.shipping = shipping or ShippingService(self.display)
        self.policy = policy or CheckoutPolicy()
        self._items = []

    @property
    def items(self):
        return tuple(self._items)

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        return iter(self._items)

    def _fail(self, failure, name=""):
        message = failure.message(name)
        logger.warning("%s: %s", failure.name, message)
        self.reporter.report_error(message)

    # --- ADD ---
    def validate(self, product, quantity):
        """Check a prospective line item without touching the cart.

        Stock is checked against the product's own quantity field on every
        call; earlier adds never deplete it.
        """
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
            return AddOutcome.BLOCKED, Failure.INVALID_QUANTITY
        if product.quantity < quantity:
            return AddOutcome.BLOCKED, Failure.OUT_OF_STOCK
        if product.is_expired(self.clock.now()):
            if self.policy.block_expired:
                return AddOutcome.BLOCKED, Failure.EXPIRED_PRODUCT
            return AddOutcome.WARNED, Failure.EXPIRED_PRODUCT
        return AddOutcome.OK, None

    def add(self, product, quantity):
        outcome, failure = self.validate(product, quantity)
        if failure is not None:
            self._fail(failure, product.name)
        if outcome is AddOutcome.BLOCKED:
            return outcome
        self._items.append(CartItem(product, quantity))
        logger.debug("Added %dx %s (%s)", quantity, product.name, outcome.value)
        return outcome

    # --- CHECKOUT ---
    def checkout(self, customer):
        if not self._items:
            self._fail(Failure.EMPTY_CART)
            return CheckoutResult(CheckoutStatus.EMPTY_CART, balance_after=customer.balance)

        subtotal = 0
        shipping_fees = 0
        shippable_items = []

        for item in self._items:
            if self.policy.accumulate_subtotal:
                subtotal += item.line_total
            else:
                # observed behaviour: only the last line item survives
                subtotal = item.line_total

            product = item.product
            if product.requires_shipping:
                for _ in range(item.quantity):
                    shippable_items.append(ShippableItem(product.name, product.weight))
                # flat fee per line item, not per unit
                shipping_fees += self.policy.shipping_fee

        total_amount = subtotal + shipping_fees

        if customer.balance < total_amount:
            self._fail(Failure.INSUFFICIENT_BALANCE)
            return CheckoutResult(CheckoutStatus.INSUFFICIENT_BALANCE, subtotal, shipping_fees,
                                  total_amount, balance_after=customer.balance)

        manifest = None
        if shippable_items:
            manifest = self.shipping.ship(shippable_items)

        self._write_receipt(subtotal, shipping_fees, total_amount)
        self._settle(customer, total_amount)

        logger.info("Checkout completed: %d line items, total %s (%s)",
                    len(self._items), total_amount, self.policy.mode)
        return CheckoutResult(CheckoutStatus.COMPLETED, subtotal, shipping_fees, total_amount,
                              manifest=manifest, balance_after=customer.balance)

    def _write_receipt(self, subtotal, shipping_fees, total_amount):
        write = self.display.write_line
        write("")
        write("** Checkout receipt")
        for item in self._items:
            write(label(f"{item.quantity}x {item.product.name}") + format_amount(item.line_total))
        write("-" * SEPARATOR_WIDTH)
        write(label("Subtotal") + format_amount(subtotal))
        write(label("Shipping") + format_amount(shipping_fees))
        write(label("Amount") + format_amount(total_amount))

    def _settle(self, customer, total_amount):
        # faithful mode leaves the balance untouched
        if self.policy.debit_balance:
            customer.balance -= total_amount
        self.display.write_line("")
        self.display.write_line(f"Customer Balance after payment: {format_amount(customer.balance)}")
