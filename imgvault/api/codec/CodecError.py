"""Image decode/encode failure."""


class CodecError(RuntimeError):
    """Raised when image bytes cannot be decoded or re-encoded."""
