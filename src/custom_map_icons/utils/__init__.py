"""Utility helpers for custom_map_icons."""

from .logging_config import setup_logging

__all__ = ["setup_logging"]
