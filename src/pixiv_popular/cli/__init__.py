"""Command line interface for Pixiv Popular."""

from .commands import app, main

__all__ = ["app", "main"]
