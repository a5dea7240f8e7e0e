"""Utility modules for the people API."""

from .logger import get_logger

__all__ = ["get_logger"]
