"""Pixiv Popular - list popular pixiv posts for a search term."""

__version__ = "0.1.0"
