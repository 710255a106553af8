"""Utility functions for ucgas.

This module provides literal width selection and size calculation.
"""

from __future__ import annotations

from .sizing import encoded_size, minimal_width

__all__ = [
    "encoded_size",
    "minimal_width",
]
