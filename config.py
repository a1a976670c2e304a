import os

# Keep receipts next to this module so the location does not depend on the
# current working directory when the demo is launched.
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
RECEIPTS_DIR = os.path.join(BASE_DIR, "receipts")

SHIPPING_FEE = 30
LABEL_WIDTH = 16
SEPARATOR_WIDTH = 22

LOG_LEVEL = os.environ.get("POS_LOG_LEVEL", "WARNING").upper()

FAITHFUL = "faithful"
CORRECTED = "corrected"


class CheckoutPolicy:
    """Switches for the known checkout quirks.

    The defaults reproduce the observed behaviour: the subtotal only keeps
    the last line item, the balance is never debited and expired products
    are only warned about.
    """

    def __init__(self, accumulate_subtotal=False, debit_balance=False,
                 block_expired=False, shipping_fee=SHIPPING_FEE):
        if shipping_fee < 0:
            raise ValueError("shipping_fee must not be negative")
        self.accumulate_subtotal = accumulate_subtotal
        self.debit_balance = debit_balance
        self.block_expired = block_expired
        self.shipping_fee = shipping_fee

    @classmethod
    def faithful(cls, **overrides):
        return cls(**overrides)

    @classmethod
    def corrected(cls, **overrides):
        overrides.setdefault("accumulate_subtotal", True)
        overrides.setdefault("debit_balance", True)
        return cls(**overrides)

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        mode = env.get("POS_CHECKOUT_MODE", FAITHFUL).strip().lower()
        if mode not in (FAITHFUL, CORRECTED):
            raise ValueError(f"POS_CHECKOUT_MODE must be '{FAITHFUL}' or '{CORRECTED}', got {mode!r}")

        kwargs = {}
        if env.get("POS_BLOCK_EXPIRED", "").strip().lower() in ("1", "true", "yes"):
            kwargs["block_expired"] = True
        fee = env.get("POS_SHIPPING_FEE")
        if fee:
            try:
                kwargs["shipping_fee"] = int(fee)
            except ValueError:
                raise ValueError(f"POS_SHIPPING_FEE must be an integer, got {fee!r}")

        if mode == CORRECTED:
            return cls.corrected(**kwargs)
        return cls.faithful(**kwargs)

    @property
    def mode(self):
        if self.accumulate_subtotal and self.debit_balance:
            return CORRECTED
        if not self.accumulate_subtotal and not self.debit_balance:
            return FAITHFUL
        return "custom"

    def __repr__(self):
        return (f"CheckoutPolicy(accumulate_subtotal={self.accumulate_subtotal}, "
                f"debit_balance={self.debit_balance}, block_expired={self.block_expired}, "
                f"shipping_fee={self.shipping_fee})")
