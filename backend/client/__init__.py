"""Paste client — clipboard capture and upload."""
