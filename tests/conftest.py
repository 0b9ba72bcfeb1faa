"""Shared fixtures for the image translator tests."""
from __future__ import annotations

import pytest
from PIL import Image


@pytest.fixture
def black_image() -> Image.Image:
	return Image.new("RGB", (200, 200), (0, 0, 0))
