from datetime import date, datetime, time
from enum import Enum


def _parse_expiry(expiry):
    if expiry is None or expiry == "":
        return None
    if isinstance(expiry, datetime):
        return expiry.date()
    if isinstance(expiry, date):
        return expiry
    if isinstance(expiry, str):
        try:
            return datetime.strptime(expiry.strip(), "%Y-%m-%d").date()
        except ValueError:
            raise ValueError(f"expiry must be formatted YYYY-MM-DD, got {expiry!r}")
    raise TypeError(f"unsupported expiry type: {type(expiry).__name__}")


#product model
class Product:
    def __init__(self, name, price, quantity, expiry=None, requires_shipping=False, weight=0):
        if price < 0:
            raise ValueError(f"{name}: price must not be negative")
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity < 0:
            raise ValueError(f"{name}: quantity must be a non-negative integer")
        if weight < 0:
            raise ValueError(f"{name}: weight must not be negative")
        self.name = name
        self.price = price
        self.quantity = quantity
        self.expiry = _parse_expiry(expiry)
        self.requires_shipping = bool(requires_shipping)
        # weight only means something for goods that get shipped
        self.weight = weight if self.requires_shipping else 0

    def is_expired(self, now):
        """True when `now` is strictly past the start of the expiry day.

        `now` may be a datetime or a plain date. Products without an expiry
        never expire.
        """
        if self.expiry is None:
            return False
        if isinstance(now, datetime):
            return self._local(now) > datetime.combine(self.expiry, time.min)
        return now > self.expiry

    @staticmethod
    def _local(now):
        # aware datetimes are compared in local time
        if now.tzinfo is not None:
            return now.astimezone().replace(tzinfo=None)
        return now

    def __repr__(self):
        return f"Product({self.name!r}, price={self.price}, quantity={self.quantity})"


#cart item (line item) model
class CartItem:
    def __init__(self, product, quantity):
        if not isinstance(quantity, int) or isinstance(quantity, bool) or quantity <= 0:
            raise ValueError("quantity must be a positive integer")
        self.product = product
        self.quantity = quantity

    @property
    def line_total(self):
        return self.product.price * self.quantity

    def __repr__(self):
        return f"CartItem({self.product.name!r}, qty={self.quantity})"


#customer model
class Customer:
    def __init__(self, balance, name=None):
        self.balance = balance
        self.name = name

    def __repr__(self):
        return f"Customer(name={self.name!r}, balance={self.balance})"


#shipping models
class ShippableItem:
    """One physical unit waiting to be shipped."""

    def __init__(self, name, weight):
        self.name = name
        self.weight = weight

    def __eq__(self, other):
        if not isinstance(other, ShippableItem):
            return NotImplemented
        return (self.name, self.weight) == (other.name, other.weight)

    def __repr__(self):
        return f"ShippableItem({self.name!r}, {self.weight})"


class ManifestGroup:
    def __init__(self, name, weight, count=1):
        self.name = name
        self.weight = weight
        self.count = count

    def __repr__(self):
        return f"ManifestGroup({self.name!r}, count={self.count}, weight={self.weight})"


class ShipmentManifest:
    def __init__(self, groups=None, total_weight=0):
        self.groups = list(groups or [])
        self.total_weight = total_weight

    @property
    def total_weight_kg(self):
        return self.total_weight / 1000

    def group(self, name):
        for g in self.groups:
            if g.name == name:
                return g
        return None

    def __len__(self):
        return len(self.groups)


#outcomes
class AddOutcome(Enum):
    OK = "ok"
    WARNED = "warned"
    BLOCKED = "blocked"


class Failure(Enum):
    OUT_OF_STOCK = "{name} is out of stock."
    EXPIRED_PRODUCT = "{name} has expired"
    INVALID_QUANTITY = "{name}: quantity must be a positive integer"
    EMPTY_CART = "Cart is empty"
    INSUFFICIENT_BALANCE = "Insufficient balance."

    def message(self, name=""):
        return self.value.format(name=name)


class CheckoutStatus(Enum):
    COMPLETED = "completed"
    EMPTY_CART = "empty_cart"
    INSUFFICIENT_BALANCE = "insufficient_balance"


class CheckoutResult:
    def __init__(self, status, subtotal=0, shipping_fees=0, total_amount=0,
                 manifest=None, balance_after=None):
        self.status = status
        self.subtotal = subtotal
        self.shipping_fees = shipping_fees
        self.total_amount = total_amount
        self.manifest = manifest
        self.balance_after = balance_after

    @property
    def ok(self):
        return self.status is CheckoutStatus.COMPLETED

    def __repr__(self):
        return (f"CheckoutResult({self.status.name}, subtotal={self.subtotal}, "
                f"shipping_fees={self.shipping_fees}, total_amount={self.total_amount})")
