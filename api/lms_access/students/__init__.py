"""Students module."""

from .models import Student


__all__ = ["Student"]
