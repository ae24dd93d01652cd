"""imgvault API layer.

Each domain package exposes ``cmd_*`` functions returning a ``StageResult``
plus the plain functions and classes those commands are built from.
"""

from .StageResult import StageResult

__all__ = ["StageResult"]
