"""Enrolment entity.

An enrolment links a student to a course for a closed interval
[start_at, end_at]. The end instant can be corrected after creation (for
example when an external registry shortens the enrolment); the change applies
to every later access decision.
"""

from dataclasses import dataclass
from datetime import datetime

from lms_access.courses.models import Course
from lms_access.students.models import Student


@dataclass
class Enrolment:
    """A student's time-boxed entitlement to a course."""

    id: str
    student: Student
    course: Course
    start_at: datetime
    end_at: datetime

    def is_active_at(self, at: datetime) -> bool:
        """Check if the enrolment covers the instant, both endpoints included."""
        return self.start_at <= at <= self.end_at

    def update_end_date(self, new_end: datetime) -> None:
        """Replace the end instant in place."""
        self.end_at = new_end

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "student_id": self.student.id,
            "course_id": self.course.id,
            "start_at": self.start_at.isoformat(),
            "end_at": self.end_at.isoformat(),
        }
