import io
import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

# Make the sources importable without an editable install.
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# Run Qt headless.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PIL import Image  # noqa: E402


def _gradient(width: int = 48, height: int = 32, mode: str = "RGB") -> Image.Image:
    image = Image.new("RGB", (width, height))
    image.putdata(
        [
            ((x * 255) // max(1, width - 1), (y * 255) // max(1, height - 1), 128)
            for y in range(height)
            for x in range(width)
        ]
    )
    if mode == "RGBA":
        image = image.convert("RGBA")
        image.putalpha(200)
    return image


def _encode(image: Image.Image, fmt: str = "PNG") -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def make_image():
    return _gradient


@pytest.fixture
def gradient_image() -> Image.Image:
    return _gradient()


@pytest.fixture
def png_bytes() -> bytes:
    return _encode(_gradient())


@pytest.fixture
def encode_image():
    return _encode
