import logging
import os
from datetime import datetime

import qrcode
from PIL import Image, ImageDraw, ImageFont

from config import RECEIPTS_DIR

logger = logging.getLogger(__name__)


class ReceiptDisplay:
    """Display that keeps every written line so it can be rendered later.

    Lines are optionally forwarded to another display (e.g. the console) so
    the customer still sees the receipt while it is being captured.
    """

    def __init__(self, forward=None):
        self.forward = forward
        self.lines = []

    def write_line(self, text):
        self.lines.append(text)
        if self.forward is not None:
            self.forward.write_line(text)

    def render(self, order_number, receipts_dir=None, order_datetime=None):
        return ReceiptGenerator.generate(order_number, self.lines, receipts_dir=receipts_dir,
                                         order_datetime=order_datetime)


class ReceiptGenerator:
    @staticmethod
    def _load_font(size):
        # Fixed-width fonts keep the padded labels aligned; fallback to default
        candidates = ["DejaVuSansMono.ttf", "cour.ttf", "LiberationMono-Regular.ttf", "consola.ttf"]
        for f in candidates:
            try:
                return ImageFont.truetype(f, size)
            except OSError:
                continue
        return ImageFont.load_default()

    @staticmethod
    def _text_size(draw_obj, text, font):
        bbox = draw_obj.textbbox((0, 0), text, font=font)
        return (bbox[2] - bbox[0], bbox[3] - bbox[1])

    @staticmethod
    def _qr_image(data, size):
        qr = qrcode.QRCode(box_size=4, border=2)
        qr.add_data(data)
        qr.make(fit=True)
        img = qr.make_image(fill_color="black", back_color="white").convert('RGB')
        return img.resize((size, size), Image.NEAREST)

    @staticmethod
    def generate(order_number, lines, receipts_dir=None, order_datetime=None):
        """Render captured receipt lines to `<receipts_dir>/<order_number>.png`.

        Returns the png path.
        """
        receipts_dir = receipts_dir or RECEIPTS_DIR
        os.makedirs(receipts_dir, exist_ok=True)
        png_path = os.path.join(receipts_dir, f"{order_number}.png")

        order_datetime = order_datetime or datetime.now()
        if isinstance(order_datetime, datetime):
            order_datetime = order_datetime.strftime("%Y-%m-%d %H:%M:%S")

        f_head = ReceiptGenerator._load_font(22)
        f_body = ReceiptGenerator._load_font(14)

        # Layout: height grows with the number of lines
        width = 480
        x = 24
        header_h = 150
        line_h = 20
        footer_h = 40
        qr_size = 110
        height = header_h + max(1, len(lines)) * line_h + footer_h

        img = Image.new('RGB', (width, height), color=(255, 255, 255))
        draw = ImageDraw.Draw(img)

        y = 24
        draw.text((x, y), "Quickship POS", font=f_head, fill=(20, 20, 20))
        y += 34
        draw.text((x, y), f"Order #: {order_number}", font=f_body, fill=(0, 0, 0))
        y += 20
        draw.text((x, y), f"Date: {order_datetime}", font=f_body, fill=(0, 0, 0))

        # QR sits in the upper-right header area so it never overlaps the lines
        img.paste(ReceiptGenerator._qr_image(str(order_number), qr_size), (width - qr_size - 16, 16))

        y = header_h - 12
        draw.line((x, y, width - x, y), fill=(200, 200, 200), width=1)
        y += 8

        for ln in lines:
            # headings ("** ...") get a darker ink than body lines
            fill = (0, 0, 0) if ln.startswith("**") else (40, 40, 40)
            draw.text((x, y), ln, font=f_body, fill=fill)
            y += line_h

        footer = "Thank you for shopping!"
        tw, _ = ReceiptGenerator._text_size(draw, footer, f_body)
        draw.text(((width - tw) / 2, height - footer_h + 10), footer, font=f_body, fill=(80, 80, 80))

        try:
            img.save(png_path)
        except OSError:
            logger.warning("Saving full-size receipt %s failed, retrying smaller", png_path)
            img_small = img.resize((int(width * 0.7), int(height * 0.7)))
            img_small.save(png_path)

        logger.info("Receipt written to %s", png_path)
        return png_path
