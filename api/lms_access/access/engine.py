"""Access decision engine.

Pure evaluation of whether a student may view course content at an instant.
Checks run in a fixed order and the first failing check decides the reason:

1. Enrolment active at the instant
2. Course started
3. Content exists in the course
4. Content available (per content type)
"""

from datetime import datetime

from lms_access.courses.models import ContentItem, Course
from lms_access.enrolments.models import Enrolment
from lms_access.students.models import Student

from .models import AccessReason, AccessResult


class AccessControlService:
    """Evaluates the access rule chain. Holds no state."""

    def can_access(
        self,
        student: Student,
        content_id: str,
        course: Course,
        enrolment: Enrolment,
        access_time: datetime,
    ) -> AccessResult:
        """Decide whether the student may view a content item.

        Args:
            student: Student attempting access
            content_id: ID of the requested content item
            course: Course the content belongs to
            enrolment: Student's enrolment on the course
            access_time: Instant of the attempt

        Returns:
            AccessResult carrying the first failing reason, or a grant
        """
        if not enrolment.is_active_at(access_time):
            return AccessResult.denied(AccessReason.ENROLMENT_INACTIVE)

        if not course.has_started_at(access_time):
            return AccessResult.denied(AccessReason.COURSE_NOT_STARTED)

        content = course.get_content(content_id)
        if content is None:
            return AccessResult.denied(AccessReason.CONTENT_NOT_FOUND)

        if not content.is_available_at(access_time, course.start_at):
            return AccessResult.denied(AccessReason.CONTENT_NOT_AVAILABLE)

        return AccessResult.granted()

    def get_accessible_content(
        self,
        student: Student,
        course: Course,
        enrolment: Enrolment,
        access_time: datetime,
    ) -> list[ContentItem]:
        """List the course content the student may view at access_time.

        Returns:
            Available items in course order; empty when the enrolment is
            inactive or the course has not started
        """
        if not enrolment.is_active_at(access_time) or not course.has_started_at(
            access_time
        ):
            return []

        return [
            item
            for item in course.all_content()
            if item.is_available_at(access_time, course.start_at)
        ]
