import cv2
import numpy as np
from io import BytesIO
from PIL import Image, ImageDraw
from typing import List, Tuple
from models.data_models import Rect

def decode_image(data: bytes) -> Image.Image:
    """Decode an uploaded image buffer; unreadable data raises PIL.UnidentifiedImageError"""
    img = Image.open(BytesIO(data))
    img.load()
    return img.convert("RGB")

def encode_png(img: Image.Image) -> bytes:
    buf = BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()

def pil_to_cv2(img: Image.Image) -> np.ndarray:
    arr = np.array(img.convert("RGB"))
    return arr[:, :, ::-1].copy()

def cv2_to_pil(img_bgr: np.ndarray) -> Image.Image:
    rgb = img_bgr[:, :, ::-1]
    return Image.fromarray(rgb)

def create_mask_for_rects(img_size: Tuple[int, int], rects: List[Rect], expand: int = 0) -> Image.Image:
    """Create mask covering the given rectangles"""
    mask = Image.new("L", img_size, 0)
    draw = ImageDraw.Draw(mask)
    for r in rects:
        x1 = max(0, r.x - expand)
        y1 = max(0, r.y - expand)
        x2 = min(img_size[0], r.x + r.w + expand)
        y2 = min(img_size[1], r.y + r.h + expand)
        draw.rectangle([x1, y1, x2, y2], fill=255)
    return mask

def inpaint_with_opencv(pil_img: Image.Image, mask_pil: Image.Image, method: str = 'telea',
                       dilate_iters: int = 1, inpaint_radius: int = 3) -> Image.Image:
    """OpenCV-based inpainting"""
    bgr = pil_to_cv2(pil_img)
    mask = np.array(mask_pil.convert("L"), dtype=np.uint8)

    _, mask_bin = cv2.threshold(mask, 1, 255, cv2.THRESH_BINARY)
    if dilate_iters > 0:
        kernel = np.ones((3, 3), np.uint8)
        mask_bin = cv2.dilate(mask_bin, kernel, iterations=dilate_iters)

    inpaint_flag = cv2.INPAINT_TELEA if method == 'telea' else cv2.INPAINT_NS
    out = cv2.inpaint(bgr, mask_bin, inpaintRadius=inpaint_radius, flags=inpaint_flag)
    return cv2_to_pil(out)
