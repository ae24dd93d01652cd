"""Malformed node-graph document."""


class ParseError(ValueError):
    """Raised when a node-graph document cannot be parsed.

    The whole document is skipped; no partial results are returned.
    """

    def __init__(self, message: str, path: str = ""):
        self.path = path
        super().__init__(f"{path}: {message}" if path else message)
