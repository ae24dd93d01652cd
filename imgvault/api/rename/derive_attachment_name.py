"""New file name for an attachment whose document was renamed."""

import re
from collections.abc import Callable
from pathlib import PurePosixPath

from .NameGenerator import DISAMBIGUATOR_LENGTH

_SUFFIX_PATTERN = re.compile(rf"_([A-Za-z0-9]{{{DISAMBIGUATOR_LENGTH}}})$")


def existing_disambiguator(stem: str) -> str | None:
    """The trailing ``_xxxxx`` suffix of a file stem, if it has one."""
    match = _SUFFIX_PATTERN.search(stem)
    return match.group(1) if match else None


def derive_attachment_name(attachment_path: str, document_base: str, name_generator: Callable[[], str]) -> str:
    """Return ``{dir}/{document_base}_{disambiguator}.{ext}`` for ``attachment_path``.

    The attachment stays in its folder. An existing disambiguator is reused so
    repeated renames keep the suffix stable.
    """
    pure = PurePosixPath(attachment_path)
    disambiguator = existing_disambiguator(pure.stem) or name_generator()
    return str(pure.with_name(f"{document_base}_{disambiguator}{pure.suffix}"))
