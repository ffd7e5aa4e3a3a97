"""Utility functions."""

from criterion.utils.time import format_timestamp, utc_now

__all__ = ["utc_now", "format_timestamp"]
