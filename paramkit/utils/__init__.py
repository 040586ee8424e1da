"""Shared helpers."""

from paramkit.utils.logging_utils import JsonLogFormatter, setup_logging

__all__ = ["JsonLogFormatter", "setup_logging"]
