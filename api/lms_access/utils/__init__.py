"""Utility modules for the LMS access service."""

from lms_access.utils.instants import ensure_utc_aware, format_instant


__all__ = ["ensure_utc_aware", "format_instant"]
