"""Fatal per-batch failure: the document itself cannot be read."""


class DocumentUnreadable(RuntimeError):
    """Raised when a batch cannot start because its document is unreadable."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")
