"""Builders for regions, images and REST-style OCR annotations."""
from __future__ import annotations

from io import BytesIO

from PIL import Image

from models.data_models import Point, Region


def make_region(x1, y1, x2, y2, text="text", translated=""):
	"""Rectangle region with its four corners in clockwise order."""
	polygon = (Point(x1, y1), Point(x2, y1), Point(x2, y2), Point(x1, y2))
	return Region(text=text, polygon=polygon, translated_text=translated)


def png_bytes(size=(200, 200), color=(0, 0, 0)) -> bytes:
	buf = BytesIO()
	Image.new("RGB", size, color).save(buf, format="PNG")
	return buf.getvalue()


def symbols(text, last_break=None):
	"""REST-style symbol dicts for a word, with a break after the last symbol."""
	out = [{"text": ch} for ch in text]
	if last_break is not None:
		out[-1]["property"] = {"detectedBreak": {"type": last_break}}
	return out


def paragraph(words, vertices):
	return {
		"words": [{"symbols": w} for w in words],
		"boundingBox": {"vertices": vertices},
	}


def box(x1, y1, x2, y2):
	return [{"x": x1, "y": y1}, {"x": x2, "y": y1}, {"x": x2, "y": y2}, {"x": x1, "y": y2}]


