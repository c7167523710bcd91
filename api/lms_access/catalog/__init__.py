"""Student and course catalog used by the gateway."""

from .service import (
    REFERENCE_COURSE_ID,
    REFERENCE_HOMEWORK_ID,
    REFERENCE_LESSON_ID,
    REFERENCE_PREP_MATERIAL_ID,
    REFERENCE_STUDENT_ID,
    CourseCatalog,
    build_reference_course,
    load_reference_catalog,
)


__all__ = [
    "REFERENCE_COURSE_ID",
    "REFERENCE_HOMEWORK_ID",
    "REFERENCE_LESSON_ID",
    "REFERENCE_PREP_MATERIAL_ID",
    "REFERENCE_STUDENT_ID",
    "CourseCatalog",
    "build_reference_course",
    "load_reference_catalog",
]
