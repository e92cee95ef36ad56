"""
QR encoding and PNG rendering for GiroCode payloads.

Produces the familiar GiroCode look:
- QR code at error correction level M (required by EPC069-12)
- Rounded frame around the code
- Caption centred on the top edge of the frame
"""

import io

import qrcode  # type: ignore[import-untyped]
from PIL import Image, ImageDraw, ImageFont

from girocode.core.config import get_settings
from girocode.core.logging import get_logger
from girocode.modules.epc_qr.schemas import CaptionOptions

logger = get_logger(__name__)


class GiroCodeRenderer:
    """Turns validated payload bytes into a framed, captioned PNG."""

    def __init__(
        self,
        module_size: int | None = None,
        caption_offset: int | None = None,
        border: int | None = None,
        corner_radius: int | None = None,
        font_path: str | None = None,
    ) -> None:
        settings = get_settings()
        self.module_size = module_size if module_size is not None else settings.girocode_module_size
        self.caption_offset = (
            caption_offset if caption_offset is not None else settings.girocode_caption_offset
        )
        self.border = border if border is not None else settings.girocode_border
        self.corner_radius = (
            corner_radius if corner_radius is not None else settings.girocode_corner_radius
        )
        self.font_path = font_path or settings.girocode_font_path

    def encode_matrix(self, data: bytes) -> qrcode.QRCode:
        """
        Encode payload bytes into a QR matrix.

        The error correction level is always M; the standard does not
        allow lower levels, so it is not a parameter.
        """
        qr = qrcode.QRCode(
            version=None,  # Auto-determine version
            error_correction=qrcode.constants.ERROR_CORRECT_M,
            box_size=self.module_size,
            border=self.border,
        )
        qr.add_data(data)
        qr.make(fit=True)
        return qr

    def render(self, qr: qrcode.QRCode, caption: CaptionOptions) -> bytes:
        """Render *qr* to PNG bytes with a rounded frame and *caption*."""
        code_img = qr.make_image(fill_color="black", back_color="white").convert("RGB")
        width, height = code_img.size
        offset = self.caption_offset
        stroke = self.module_size

        canvas = Image.new("RGB", (width, height + offset), "white")
        canvas.paste(code_img, (0, offset))

        draw = ImageDraw.Draw(canvas)
        half = stroke // 2
        frame_top = max(offset - half, 0)
        draw.rounded_rectangle(
            (half, frame_top, width - 1 - half, height + offset - 1 - half),
            radius=self.corner_radius,
            outline="black",
            width=stroke,
        )

        if caption.text:
            self._draw_caption(draw, caption, width, frame_top + half)

        buffer = io.BytesIO()
        canvas.save(buffer, format="PNG", optimize=True)
        buffer.seek(0)

        return buffer.read()

    def _draw_caption(
        self,
        draw: ImageDraw.ImageDraw,
        caption: CaptionOptions,
        width: int,
        center_y: int,
    ) -> None:
        """Clear a gap in the top frame edge and draw the caption into it."""
        font = self._load_font(caption.size)

        bbox = draw.textbbox((0, 0), caption.text, font=font)
        text_width = bbox[2] - bbox[0]
        text_height = bbox[3] - bbox[1]
        left = (width - text_width) // 2
        top = max(center_y - text_height // 2, 0)

        draw.rectangle(
            (left - self.module_size, top, left + text_width + self.module_size, top + text_height),
            fill="white",
        )
        draw.text((left - bbox[0], top - bbox[1]), caption.text, fill="black", font=font)

    def _load_font(self, size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
        try:
            return ImageFont.truetype(self.font_path, size)
        except OSError:
            logger.warning("caption_font_fallback", path=self.font_path)
            return ImageFont.load_default(size=size)
