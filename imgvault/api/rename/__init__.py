"""Rename domain: keeping attachment names in step with documents."""

from .._output_schemas.rename import RenameOutput
from .derive_attachment_name import derive_attachment_name, existing_disambiguator
from .NameGenerator import DISAMBIGUATOR_ALPHABET, DISAMBIGUATOR_LENGTH, NameGenerator
from .RenameCoordinator import RenameCoordinator
from .RenameFailure import RenameFailure
from .RenameResult import RenameResult
from .RenameState import RenameState

__all__ = [
    "DISAMBIGUATOR_ALPHABET",
    "DISAMBIGUATOR_LENGTH",
    "NameGenerator",
    "RenameCoordinator",
    "RenameFailure",
    "RenameOutput",
    "RenameResult",
    "RenameState",
    "derive_attachment_name",
    "existing_disambiguator",
]
