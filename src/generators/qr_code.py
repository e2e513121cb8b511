"""
QR Code Generator

Shows a QR code for the project URL, drawn with Pixels.
"""

from typing import List, Tuple
import qrcode
from generators.pixels import Pixels

PROJECT_URL = "https://github.com/991jo/asciimation"

# Quiet zone around the code, in modules
BORDER = 2


def qr_bitmap(text: str, border: int = BORDER) -> List[List[bool]]:
    """
    QR code for text as rows of pixels, True for light modules

    Light modules are the lit ones so the code reads correctly on a
    dark terminal background. The quiet zone is included.
    """
    qr = qrcode.QRCode(border=border)
    qr.add_data(text)
    qr.make(fit=True)
    return [[not dark for dark in row] for row in qr.get_matrix()]


class QrCode(Pixels):
    NAME = "QR Code"
    AUTHOR = "Imarok"

    def __init__(self, text: str = PROJECT_URL, top_left: Tuple[int, int] = (5, 6)):
        super().__init__(qr_bitmap(text), top_left)
        self.text = text
