"""Utility modules for Pixiv Popular."""

from .logging import setup_logging
from .timer import Stopwatch, format_duration

__all__ = ["setup_logging", "Stopwatch", "format_duration"]
