"""Codec domain: image conversion and compression."""

from .CodecError import CodecError
from .ImageCodec import PASSTHROUGH_EXTENSIONS, ImageCodec, format_for_extension

__all__ = ["PASSTHROUGH_EXTENSIONS", "CodecError", "ImageCodec", "format_for_extension"]
