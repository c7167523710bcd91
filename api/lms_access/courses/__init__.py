"""Course module.

Provides:
- Course: scheduling window (start, optional end) and ordered content
- ContentItem: lesson, homework or prep material with per-type availability
"""

from .models import (
    ContentItem,
    ContentType,
    Course,
    create_homework,
    create_lesson,
    create_prep_material,
)


__all__ = [
    "ContentItem",
    "ContentType",
    "Course",
    "create_homework",
    "create_lesson",
    "create_prep_material",
]
