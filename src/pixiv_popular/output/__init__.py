"""Console output for search results."""

from .printer import ResultPrinter

__all__ = ["ResultPrinter"]
