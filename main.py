import argparse
import logging
import sys
from datetime import datetime

import config
from cart import Cart
from config import CheckoutPolicy
from console import ConsoleDisplay, ConsoleReporter, FixedClock, SystemClock
from models import Customer, Product
from receipt import ReceiptDisplay


def build_catalog():
    return {
        'cheese': Product("Cheese", 100, 10, "2025-12-31", True, 200),
        'biscuits': Product("Biscuits", 150, 10, "2025-12-31", True, 700),
        'tv': Product("TV", 3000, 5, None, True, 5000),
        'scratch_card': Product("ScratchCard", 50, 10, None, False),
    }


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Run the demo checkout')
    parser.add_argument('--corrected', action='store_true',
                        help='Sum the subtotal over all line items and debit the balance')
    parser.add_argument('--today', help='Pretend today is YYYY-MM-DD (expiry checks)')
    parser.add_argument('--balance', type=float, default=10000, help='Customer starting balance')
    parser.add_argument('--receipt-png', action='store_true', help='Also render the receipt as a PNG')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else config.LOG_LEVEL,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    if args.corrected:
        policy = CheckoutPolicy.corrected()
    else:
        policy = CheckoutPolicy.from_env()

    clock = SystemClock()
    if args.today:
        try:
            clock = FixedClock(datetime.strptime(args.today, "%Y-%m-%d"))
        except ValueError:
            print(f"--today must be YYYY-MM-DD, got {args.today!r}", file=sys.stderr)
            return 2

    display = ConsoleDisplay()
    if args.receipt_png:
        display = ReceiptDisplay(forward=display)

    catalog = build_catalog()
    customer = Customer(args.balance)
    cart = Cart(reporter=ConsoleReporter(), display=display, clock=clock, policy=policy)

    cart.add(catalog['cheese'], 2)
    cart.add(catalog['tv'], 3)
    cart.add(catalog['scratch_card'], 1)

    result = cart.checkout(customer)

    if result.ok and args.receipt_png:
        now = datetime.now()
        order_num = f"QS-{now.strftime('%Y%m%d')}-{int(now.timestamp())}"
        png = display.render(order_num)
        print(f"\nReceipt saved to {png}")

    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
