"""Tests for rectangle derivation and reading-order sorting."""
from __future__ import annotations

from helpers import make_region
from models.data_models import Point, Rect
from utils.geometry_utils import region_rect, sort_regions, text_area


def test_region_rect_inside_image() -> None:
	region = make_region(0, 0, 100, 30)
	assert region_rect(region.polygon, 200, 200) == Rect(0, 0, 100, 30)


def test_region_rect_clamps_to_image() -> None:
	"""Coordinates outside the image are clamped and size stays at least 1."""
	region = make_region(-20, -5, 250, 40)
	assert region_rect(region.polygon, 200, 200) == Rect(0, 0, 200, 40)

	outside = make_region(300, 300, 400, 400)
	assert region_rect(outside.polygon, 200, 200) == Rect(200, 200, 1, 1)


def test_region_rect_unordered_vertices() -> None:
	polygon = (Point(100, 30), Point(10, 5), Point(100, 5), Point(10, 30))
	assert region_rect(polygon, 200, 200) == Rect(10, 5, 90, 25)


def test_text_area_padding() -> None:
	"""Pad is 8% of the short side; drawable area never drops below 10."""
	assert text_area(Rect(0, 0, 100, 30)) == (2, 96, 26)
	assert text_area(Rect(0, 0, 12, 12)) == (0, 12, 12)
	assert text_area(Rect(0, 0, 400, 5)) == (0, 400, 10)


def test_sort_top_to_bottom() -> None:
	lower = make_region(0, 100, 50, 120, text="lower")
	upper = make_region(150, 10, 190, 30, text="upper")
	assert [r.text for r in sort_regions([lower, upper])] == ["upper", "lower"]


def test_sort_same_line_left_to_right() -> None:
	"""Tops within six pixels are treated as one line."""
	right = make_region(120, 12, 180, 30, text="right")
	left = make_region(10, 16, 60, 30, text="left")
	assert [r.text for r in sort_regions([right, left])] == ["left", "right"]


def test_sort_beyond_tolerance_uses_top() -> None:
	right = make_region(120, 10, 180, 30, text="right")
	left = make_region(10, 17, 60, 30, text="left")
	assert [r.text for r in sort_regions([left, right])] == ["right", "left"]


def test_sort_is_stable() -> None:
	first = make_region(10, 10, 50, 30, text="first")
	second = make_region(10, 12, 50, 30, text="second")
	third = make_region(10, 10, 50, 30, text="third")
	assert [r.text for r in sort_regions([first, second, third])] == ["first", "second", "third"]


def test_sort_does_not_mutate_input() -> None:
	regions = [make_region(0, 50, 10, 60, text="b"), make_region(0, 0, 10, 10, text="a")]
	sort_regions(regions)
	assert [r.text for r in regions] == ["b", "a"]


def test_region_rect_fractional_vertices_covered() -> None:
	"""Fractional edges round outward so the rect covers the whole polygon."""
	region = make_region(10.7, 5.2, 20.2, 15.6)
	rect = region_rect(region.polygon, 200, 200)
	assert rect == Rect(10, 5, 11, 11)
	assert rect.x + rect.w >= 20.2
	assert rect.y + rect.h >= 15.6


def test_sort_tops_exactly_at_tolerance() -> None:
	"""A six pixel gap still counts as the same line."""
	right = make_region(120, 10, 180, 30, text="right")
	left = make_region(10, 16, 60, 30, text="left")
	assert [r.text for r in sort_regions([right, left])] == ["left", "right"]
