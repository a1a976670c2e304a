import os
import shutil
import tempfile
import unittest
import sys
from datetime import datetime
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from PIL import Image

from cart import Cart
from console import FixedClock, MemoryDisplay, MemoryReporter
from models import Customer, Product
from receipt import ReceiptDisplay, ReceiptGenerator


class ReceiptTests(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_display_captures_and_forwards(self):
        forward = MemoryDisplay()
        display = ReceiptDisplay(forward=forward)
        display.write_line("** Checkout receipt")
        display.write_line("Amount          110")
        self.assertEqual(display.lines, ["** Checkout receipt", "Amount          110"])
        self.assertEqual(forward.lines, display.lines)

    def test_generate_creates_png(self):
        lines = ["", "** Checkout receipt", "1x ScratchCard  50", "-" * 22, "Amount          50"]
        png = ReceiptGenerator.generate('unittest-1', lines, receipts_dir=self.tmpdir,
                                        order_datetime=datetime(2025, 6, 1, 12, 0))
        self.assertEqual(png, os.path.join(self.tmpdir, 'unittest-1.png'))
        self.assertTrue(os.path.exists(png))
        with Image.open(png) as img:
            self.assertEqual(img.format, 'PNG')
            self.assertEqual(img.width, 480)

    def test_generate_no_lines(self):
        png = ReceiptGenerator.generate('unittest-empty', [], receipts_dir=self.tmpdir)
        self.assertTrue(os.path.exists(png))

    def test_render_after_checkout(self):
        display = ReceiptDisplay()
        cart = Cart(reporter=MemoryReporter(), display=display, clock=FixedClock(datetime(2025, 6, 1)))
        cart.add(Product("TV", 3000, 5, None, True, 5000), 1)
        self.assertTrue(cart.checkout(Customer(5000)).ok)
        self.assertIn("** Shipment notice **", display.lines)

        png = display.render('unittest-2', receipts_dir=self.tmpdir)
        self.assertTrue(os.path.exists(png))
        # taller receipts for more lines
        with Image.open(png) as img:
            self.assertGreater(img.height, 150 + 20 * 10)


if __name__ == '__main__':
    unittest.main()
