"""Utility functions for isocodec.

This module provides logging setup for host programs.
"""

from __future__ import annotations

from .log import configure_logging

__all__ = [
    "configure_logging",
]
