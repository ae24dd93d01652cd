"""A store rename that could not be performed."""


class RenameFailure(RuntimeError):
    """The store rejected renaming one attachment, e.g. on a name collision."""

    def __init__(self, path: str, new_path: str, reason: str):
        self.path = path
        self.new_path = new_path
        self.reason = reason
        super().__init__(f"Cannot rename {path} to {new_path}: {reason}")
