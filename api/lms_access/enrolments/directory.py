"""In-memory enrolment directory.

Keyed store owning every Enrolment it is given. Callers refer to enrolments
by ID and re-fetch through the directory, so end-date corrections are seen by
all later lookups.

Not thread-safe: create, update_end_date and find_active must be externally
synchronized when shared between threads.
"""

from datetime import datetime

from lms_access.core.logging import get_logger
from lms_access.courses.models import Course
from lms_access.students.models import Student

from .models import Enrolment


logger = get_logger(__name__)


class EnrolmentDirectory:
    """Insertion-ordered store of enrolments keyed by enrolment ID."""

    def __init__(self) -> None:
        self._enrolments: dict[str, Enrolment] = {}

    def __len__(self) -> int:
        return len(self._enrolments)

    def __contains__(self, enrolment_id: object) -> bool:
        return enrolment_id in self._enrolments

    def create(
        self,
        enrolment_id: str,
        student: Student,
        course: Course,
        start_at: datetime,
        end_at: datetime,
    ) -> Enrolment:
        """Store a new enrolment.

        An existing enrolment with the same ID is replaced and keeps its
        position in the scan order.

        Returns:
            The stored enrolment
        """
        if enrolment_id in self._enrolments:
            logger.warning("enrolment_overwritten", enrolment_id=enrolment_id)

        enrolment = Enrolment(
            id=enrolment_id,
            student=student,
            course=course,
            start_at=start_at,
            end_at=end_at,
        )
        self._enrolments[enrolment_id] = enrolment
        return enrolment

    def get(self, enrolment_id: str) -> Enrolment | None:
        """Get an enrolment by ID."""
        return self._enrolments.get(enrolment_id)

    def find_active(
        self,
        student: Student,
        course: Course,
        at: datetime,
    ) -> Enrolment | None:
        """Find the student's enrolment on the course that is active at `at`.

        Scans in insertion order; when several enrolments match, the first
        one stored wins.
        """
        for enrolment in self._enrolments.values():
            if (
                enrolment.student.id == student.id
                and enrolment.course.id == course.id
                and enrolment.is_active_at(at)
            ):
                return enrolment
        return None

    def update_end_date(self, enrolment_id: str, new_end: datetime) -> bool:
        """Change an enrolment's end instant.

        Returns:
            True if the enrolment exists and was updated, False otherwise
        """
        enrolment = self.get(enrolment_id)
        if enrolment is None:
            return False

        enrolment.update_end_date(new_end)
        return True

    def list_by_student(self, student: Student) -> list[Enrolment]:
        """Get all of a student's enrolments in insertion order."""
        return [
            enrolment
            for enrolment in self._enrolments.values()
            if enrolment.student.id == student.id
        ]
