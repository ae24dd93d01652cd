"""Filesystem-backed document store."""
