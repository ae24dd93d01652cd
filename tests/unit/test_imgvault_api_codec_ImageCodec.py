"""Unit tests for ImageCodec using Pillow-generated images."""

import io

import pytest
from PIL import Image

from imgvault.api.codec import CodecError, ImageCodec, format_for_extension
from tests.unit.fakes import png_header

pytestmark = pytest.mark.codec


def _image_bytes(fmt: str, mode: str = "RGB", size=(64, 48), **save_kwargs) -> bytes:
    color = (200, 30, 30, 128) if mode == "RGBA" else (200, 30, 30)
    image = Image.new(mode, size, color)
    # Some detail so compression has something to work with
    for x in range(0, size[0], 4):
        image.putpixel((x, x % size[1]), (0, 0, 0, 255) if mode == "RGBA" else (0, 0, 0))
    buffer = io.BytesIO()
    image.save(buffer, format=fmt, **save_kwargs)
    return buffer.getvalue()


def _open(data: bytes) -> Image.Image:
    return Image.open(io.BytesIO(data))


def test_convert_png_with_alpha_to_jpeg():
    result = ImageCodec().convert(_image_bytes("PNG", "RGBA"), "JPEG", quality=0.8)
    image = _open(result)
    assert image.format == "JPEG"
    assert image.mode == "RGB"
    assert image.size == (64, 48)


def test_convert_webp_to_png():
    result = ImageCodec().convert(_image_bytes("WEBP"), "PNG")
    assert _open(result).format == "PNG"


def test_png_color_depth_reduces_palette():
    result = ImageCodec().convert(_image_bytes("JPEG"), "PNG", color_depth=0.25)
    image = _open(result)
    assert image.format == "PNG"
    assert image.mode == "P"


def test_lower_quality_gives_smaller_jpeg():
    source = _image_bytes("PNG", size=(256, 256))
    codec = ImageCodec()
    high = codec.convert(source, "JPEG", quality=1.0)
    low = codec.convert(source, "JPEG", quality=0.1)
    assert len(low) < len(high)


def test_compress_keeps_format_and_never_grows():
    source = _image_bytes("JPEG", size=(256, 256), quality=100)
    result = ImageCodec().compress(source, quality=0.3)
    assert _open(result).format == "JPEG"
    assert len(result) <= len(source)


def test_compress_returns_original_when_not_smaller():
    source = _image_bytes("JPEG", size=(128, 128), quality=5, optimize=True)
    assert ImageCodec().compress(source, quality=1.0) == source


def test_undecodable_input():
    with pytest.raises(CodecError, match="Cannot decode"):
        ImageCodec().convert(b"definitely not an image", "JPEG")
    with pytest.raises(CodecError):
        ImageCodec().compress(b"")


@pytest.mark.parametrize("method", ["convert", "compress"])
def test_decompression_bomb_is_a_codec_error(method):
    bomb = png_header(20000, 20000)
    args = (bomb, "JPEG") if method == "convert" else (bomb,)
    with pytest.raises(CodecError, match="Cannot decode"):
        getattr(ImageCodec(), method)(*args)


@pytest.mark.parametrize(
    "extension,expected",
    [(".jpg", "JPEG"), ("jpeg", "JPEG"), ("PNG", "PNG"), ("webp", "WEBP"), ("svg", None)],
)
def test_format_for_extension(extension, expected):
    assert format_for_extension(extension) == expected
