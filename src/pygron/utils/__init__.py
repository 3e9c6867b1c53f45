"""Utility functions for pygron."""

from .validation import ValidationUtils

__all__ = ["ValidationUtils"]
