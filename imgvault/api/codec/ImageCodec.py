"""Image format conversion and compression backed by Pillow."""

import io
import logging
from typing import Literal

from PIL import Image, UnidentifiedImageError

from .CodecError import CodecError

logger = logging.getLogger(__name__)

TargetFormat = Literal["JPEG", "PNG"]

# Formats passed through untouched
PASSTHROUGH_EXTENSIONS = frozenset({"gif", "svg"})

_FORMAT_BY_EXTENSION = {
    "jpg": "JPEG",
    "jpeg": "JPEG",
    "png": "PNG",
    "webp": "WEBP",
    "gif": "GIF",
    "bmp": "BMP",
    "tiff": "TIFF",
    "avif": "AVIF",
}


def format_for_extension(extension: str) -> str | None:
    """Pillow format name for a file extension (with or without dot)."""
    return _FORMAT_BY_EXTENSION.get(extension.lstrip(".").lower())


def _jpeg_quality(quality: float) -> int:
    return max(1, min(100, round(quality * 100)))


class ImageCodec:
    """Re-encodes images into the configured target format."""

    def _open(self, data: bytes) -> Image.Image:
        try:
            image = Image.open(io.BytesIO(data))
            image.load()
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as e:
            raise CodecError(f"Cannot decode image: {e}") from e
        return image

    def _encode(self, image: Image.Image, target_format: str, quality: float, color_depth: float = 1.0) -> bytes:
        buffer = io.BytesIO()
        try:
            if target_format == "JPEG":
                if image.mode in ("RGBA", "LA", "P"):
                    # JPEG has no alpha; flatten onto white
                    rgba = image.convert("RGBA")
                    background = Image.new("RGB", rgba.size, (255, 255, 255))
                    background.paste(rgba, mask=rgba.split()[-1])
                    image = background
                elif image.mode != "RGB":
                    image = image.convert("RGB")
                image.save(buffer, format="JPEG", quality=_jpeg_quality(quality), optimize=True)
            elif target_format == "PNG":
                if color_depth < 1.0:
                    colors = max(2, min(256, round(256 * color_depth)))
                    image = image.convert("RGBA").quantize(colors=colors)
                image.save(buffer, format="PNG", optimize=True)
            else:
                image.save(buffer, format=target_format)
        except (OSError, ValueError, KeyError) as e:
            raise CodecError(f"Cannot encode image as {target_format}: {e}") from e
        return buffer.getvalue()

    def convert(
        self, data: bytes, target_format: TargetFormat, quality: float = 0.8, color_depth: float = 1.0
    ) -> bytes:
        """Decode ``data`` and re-encode it as ``target_format``.

        Raises:
            CodecError: If the input cannot be decoded or the output encoded.
        """
        image = self._open(data)
        encoded = self._encode(image, target_format, quality, color_depth)
        logger.debug("Converted %s image to %s: %d -> %d bytes", image.format, target_format, len(data), len(encoded))
        return encoded

    def compress(self, data: bytes, quality: float = 0.8, color_depth: float = 1.0) -> bytes:
        """Re-encode ``data`` in its own format at ``quality``.

        The original bytes are kept when re-encoding would not make them smaller.
        """
        image = self._open(data)
        source_format = image.format or "PNG"
        encoded = self._encode(image, source_format, quality, color_depth)
        if len(encoded) >= len(data):
            return data
        logger.debug("Compressed %s image: %d -> %d bytes", source_format, len(data), len(encoded))
        return encoded
