"""Shared constants for imgvault dot-directories and artefact locations."""

IMGVAULT_HOME_EXT = ".imgvault"  # user-level state/config directory suffix
