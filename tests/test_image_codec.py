import io
from pathlib import Path

import pytest
from PIL import Image

from instafilter.core import image_codec
from instafilter.core.image_codec import decode_image, encode_png, normalise_mode
from instafilter.core.image_source import BytesImageSelection, FileImageSelection
from instafilter.core.share import build_share_payload
from instafilter.errors import DecodeError


def test_decode_png(png_bytes: bytes) -> None:
    image = decode_image(png_bytes)
    assert image.size == (48, 32)
    assert image.mode == "RGB"


def test_decode_jpeg(make_image, encode_image) -> None:
    image = decode_image(encode_image(make_image(20, 10), "JPEG"))
    assert image.size == (20, 10)


@pytest.mark.parametrize("data", [b"", b"not an image", b"\x89PNG\r\n\x1a\n" + b"\x00" * 16])
def test_decode_rejects_bad_data(data: bytes) -> None:
    with pytest.raises(DecodeError):
        decode_image(data)


def test_decode_applies_exif_orientation(make_image) -> None:
    source = make_image(30, 10)
    exif = Image.Exif()
    exif[0x0112] = 6  # rotate 90 degrees clockwise when displayed
    buffer = io.BytesIO()
    source.save(buffer, format="JPEG", exif=exif.tobytes())

    assert decode_image(buffer.getvalue()).size == (10, 30)


def test_normalise_mode_keeps_transparency() -> None:
    assert normalise_mode(Image.new("LA", (2, 2))).mode == "RGBA"
    assert normalise_mode(Image.new("L", (2, 2))).mode == "RGB"
    assert normalise_mode(Image.new("CMYK", (2, 2))).mode == "RGB"


def test_encode_png_round_trips_pixels(make_image) -> None:
    source = make_image(8, 8)
    assert list(decode_image(encode_png(source)).getdata()) == list(source.getdata())


def test_share_payload(make_image) -> None:
    image = make_image(8, 8)
    payload = build_share_payload(image)

    assert payload is not None
    assert payload.title == "Instafilter processed image"
    assert payload.mime_type == "image/png"
    assert payload.data.startswith(b"\x89PNG")
    assert build_share_payload(None) is None


def test_file_selection_reads_bytes(tmp_path: Path, png_bytes: bytes) -> None:
    path = tmp_path / "photo.png"
    path.write_bytes(png_bytes)

    assert FileImageSelection(path).read_bytes() == png_bytes
    assert FileImageSelection(tmp_path / "missing.png").read_bytes() is None
    assert BytesImageSelection(None).read_bytes() is None


def test_mode_conversion_failure_is_a_decode_error(png_bytes: bytes, monkeypatch) -> None:
    def _refuse(image):
        raise ValueError("conversion not supported")

    monkeypatch.setattr(image_codec, "normalise_mode", _refuse)
    with pytest.raises(DecodeError):
        decode_image(png_bytes)
