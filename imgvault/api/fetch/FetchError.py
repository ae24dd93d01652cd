"""Failure to obtain image bytes for a URL."""


class FetchError(RuntimeError):
    """Network failure, non-image response or undersized payload for one URL."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"{reason} ({url})")
