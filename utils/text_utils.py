import math
import logging
from functools import lru_cache
from PIL import Image, ImageDraw, ImageFont
from typing import Callable, List, Tuple
from models.data_models import FontFit, Region, TextStyle
from config.settings import (
    MIN_FONT_SIZE, INITIAL_FONT_RATIO, LINE_HEIGHT_RATIO, FONT_SHRINK_FACTOR,
    BACKGROUND_COLOR, TEXT_COLOR, BOX_EXPANSION_INPAINT
)
from .geometry_utils import region_rect, text_area
from .image_utils import decode_image, encode_png, create_mask_for_rects, inpaint_with_opencv

logger = logging.getLogger(__name__)


@lru_cache(maxsize=256)
def load_font(font_path: str, size: int):
    """Load a TrueType font, falling back to Pillow's bundled font"""
    try:
        return ImageFont.truetype(font_path, size)
    except OSError:
        return ImageFont.load_default(size=size)


def wrap_lines(text: str, max_width: float, measure: Callable[[str], float]) -> List[str]:
    """
    Greedy word wrap. A word wider than max_width is kept whole on its own line.
    """
    words = " ".join((text or "").split()).split(" ")
    out = []
    line = ""
    for w in words:
        if not w:
            continue
        test = f"{line} {w}" if line else w
        if line and measure(test) > max_width:
            out.append(line)
            line = w
        else:
            line = test
    if line:
        out.append(line)
    return out


def draw_lines(draw: ImageDraw.ImageDraw, lines: List[str], origin: Tuple[int, int],
               bottom: int, style: TextStyle) -> int:
    """Draw lines downward from origin; lines whose top passes bottom are dropped"""
    x, cy = origin
    drawn = 0
    for line in lines:
        if cy > bottom:
            break
        draw.text((x, cy), line, font=style.font, fill=style.fill)
        cy += style.line_height
        drawn += 1
    return drawn


class TextOverlay:
    def __init__(self, font_path: str, min_font_size: int = MIN_FONT_SIZE, erase_mode: str = "fill"):
        self.font_path = font_path
        self.min_font_size = min_font_size
        self.erase_mode = erase_mode

    def fit_font(self, text: str, max_w: int, max_h: int, draw: ImageDraw.ImageDraw) -> FontFit:
        """Shrink the font until the wrapped text fits max_h or the minimum size is reached"""
        font_size = max(self.min_font_size, int(math.floor(max_h * INITIAL_FONT_RATIO)))
        attempts = 0
        while True:
            attempts += 1
            font = load_font(self.font_path, font_size)
            line_height = int(math.ceil(font_size * LINE_HEIGHT_RATIO))
            lines = wrap_lines(text, max_w, lambda s: draw.textlength(s, font=font))

            if len(lines) * line_height <= max_h or font_size <= self.min_font_size:
                return FontFit(font, font_size, line_height, lines, attempts)
            font_size = int(math.floor(font_size * FONT_SHRINK_FACTOR))

    def _inpaint_regions(self, img: Image.Image, regions: List[Region]) -> Image.Image:
        w_img, h_img = img.size
        rects = [region_rect(r.polygon, w_img, h_img) for r in regions]
        mask = create_mask_for_rects(img.size, rects, expand=BOX_EXPANSION_INPAINT)
        return inpaint_with_opencv(img, mask, method='telea')

    def overlay_translated_text(self, img_pil: Image.Image, regions: List[Region]) -> Image.Image:
        """Erase each region and draw its translated text in place"""
        out = img_pil.convert("RGB")
        if self.erase_mode == "inpaint" and regions:
            out = self._inpaint_regions(out, regions)

        w_img, h_img = out.size
        draw = ImageDraw.Draw(out)

        for region in regions:
            rect = region_rect(region.polygon, w_img, h_img)
            pad, max_w, max_h = text_area(rect)

            if self.erase_mode != "inpaint":
                draw.rectangle([rect.x, rect.y, rect.x + rect.w - 1, rect.y + rect.h - 1],
                               fill=BACKGROUND_COLOR)

            fit = self.fit_font(region.translated_text, max_w, max_h, draw)
            style = TextStyle(font=fit.font, fill=TEXT_COLOR, line_height=fit.line_height)
            draw_lines(draw, fit.lines, (rect.x + pad, rect.y + pad),
                       rect.y + rect.h - fit.line_height, style)

        logger.info(f"Overlaid {len(regions)} region(s)")
        return out

    def render_bytes(self, image_bytes: bytes, regions: List[Region]) -> bytes:
        """Decode, overlay and re-encode as PNG with the same dimensions"""
        img = decode_image(image_bytes)
        return encode_png(self.overlay_translated_text(img, regions))
