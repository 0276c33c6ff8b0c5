"""Shared helpers for the livecheck package."""

from livecheck.utils.logger import get_logger

__all__ = ["get_logger"]
