"""In-memory catalog of students and courses.

Resolves the IDs received at the gateway into entity values. A deployment
backed by a real store would replace this with repository calls.
"""

from datetime import UTC, datetime

from lms_access.core.logging import get_logger
from lms_access.courses.models import (
    Course,
    create_homework,
    create_lesson,
    create_prep_material,
)
from lms_access.students.models import Student


logger = get_logger(__name__)


class CourseCatalog:
    """Registry of known students and courses keyed by ID."""

    def __init__(self) -> None:
        self._students: dict[str, Student] = {}
        self._courses: dict[str, Course] = {}

    def add_student(self, student: Student) -> None:
        self._students[student.id] = student

    def add_course(self, course: Course) -> None:
        self._courses[course.id] = course

    def get_student(self, student_id: str) -> Student | None:
        return self._students.get(student_id)

    def get_course(self, course_id: str) -> Course | None:
        return self._courses.get(course_id)

    @property
    def students(self) -> list[Student]:
        return list(self._students.values())

    @property
    def courses(self) -> list[Course]:
        return list(self._courses.values())


# ==============================================================================
# Reference Dataset
# ==============================================================================

REFERENCE_STUDENT_ID = "1342"
REFERENCE_COURSE_ID = "5874"
REFERENCE_LESSON_ID = "8001"
REFERENCE_HOMEWORK_ID = "8002"
REFERENCE_PREP_MATERIAL_ID = "8003"


def build_reference_course() -> Course:
    """A-Level Biology, 13/05/2025 to 12/06/2025, with one item of each type."""
    course = Course(
        id=REFERENCE_COURSE_ID,
        title="A-Level Biology",
        start_at=datetime(2025, 5, 13, tzinfo=UTC),
        end_at=datetime(2025, 6, 12, tzinfo=UTC),
    )
    course.add_content(
        create_lesson(
            REFERENCE_LESSON_ID,
            "Cell Structure",
            datetime(2025, 5, 15, 10, 0, tzinfo=UTC),
        )
    )
    course.add_content(create_homework(REFERENCE_HOMEWORK_ID, "Label a Plant Cell"))
    course.add_content(
        create_prep_material(REFERENCE_PREP_MATERIAL_ID, "Biology Reading Guide")
    )
    return course


def load_reference_catalog() -> CourseCatalog:
    """Build a catalog holding the reference student and course."""
    catalog = CourseCatalog()
    catalog.add_student(Student(id=REFERENCE_STUDENT_ID, name="Emma"))
    catalog.add_course(build_reference_course())

    logger.debug(
        "reference_catalog_loaded",
        students=len(catalog.students),
        courses=len(catalog.courses),
    )
    return catalog
