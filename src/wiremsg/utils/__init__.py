"""Utility functions for wiremsg.

This module provides size calculation helpers.
"""

from __future__ import annotations

from .sizing import encoded_size, header_sizes

__all__ = [
    "encoded_size",
    "header_sizes",
]
