"""imgvault: image link localization and attachment maintenance for markdown vaults."""

__version__ = "0.1.0"
