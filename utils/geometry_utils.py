import math
from functools import cmp_to_key
from typing import List, Tuple
from models.data_models import Polygon, Rect, Region
from config.settings import Y_TOLERANCE, PAD_RATIO, MIN_TEXT_AREA


def clamp(value, low, high):
    return max(low, min(value, high))


def top_y(region: Region) -> float:
    return min(p.y for p in region.polygon)


def left_x(region: Region) -> float:
    return min(p.x for p in region.polygon)


def region_rect(polygon: Polygon, img_w: int, img_h: int) -> Rect:
    """Axis-aligned rectangle of a polygon, clamped to the image; fractional edges widen outward"""
    xs = [p.x for p in polygon]
    ys = [p.y for p in polygon]
    x = int(math.floor(clamp(min(xs), 0, img_w)))
    y = int(math.floor(clamp(min(ys), 0, img_h)))
    w = max(1, int(math.ceil(clamp(max(xs), 0, img_w))) - x)
    h = max(1, int(math.ceil(clamp(max(ys), 0, img_h))) - y)
    return Rect(x, y, w, h)


def text_area(rect: Rect, pad_ratio: float = PAD_RATIO) -> Tuple[int, int, int]:
    """Returns (pad, max_w, max_h) for the drawable area inside a rect"""
    pad = int(math.floor(min(rect.w, rect.h) * pad_ratio))
    max_w = max(MIN_TEXT_AREA, rect.w - 2 * pad)
    max_h = max(MIN_TEXT_AREA, rect.h - 2 * pad)
    return pad, max_w, max_h


def sort_regions(regions: List[Region], y_tolerance: float = Y_TOLERANCE) -> List[Region]:
    """
    Approximate reading order: top to bottom, then left to right for regions
    whose tops are within y_tolerance. Not column aware.
    """
    def compare(a, b):
        ay, by = top_y(a), top_y(b)
        if abs(ay - by) > y_tolerance:
            return -1 if ay < by else 1
        ax, bx = left_x(a), left_x(b)
        if ax == bx:
            return 0
        return -1 if ax < bx else 1

    return sorted(regions, key=cmp_to_key(compare))
