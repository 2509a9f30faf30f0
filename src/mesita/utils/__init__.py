"""Helpers shared by the Mesita modules."""

from mesita.utils.logger import get_logger

__all__ = ["get_logger"]
