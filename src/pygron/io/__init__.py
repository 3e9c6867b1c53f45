"""Input utilities for pygron."""

from .input_reader import InputReader, is_url

__all__ = ["InputReader", "is_url"]
