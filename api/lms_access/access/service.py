"""LMS access service layer.

Business logic for:
- Checking access to a single content item
- Listing accessible content
- Creating enrolments and correcting their end dates
"""

from datetime import datetime

from lms_access.core.logging import get_logger
from lms_access.courses.models import ContentItem, Course
from lms_access.enrolments.directory import EnrolmentDirectory
from lms_access.students.models import Student

from .engine import AccessControlService
from .models import AccessReason, AccessResult


logger = get_logger(__name__)


class LMSService:
    """Entry point combining enrolment lookup with the access rules."""

    def __init__(
        self,
        access_control: AccessControlService | None = None,
        enrolments: EnrolmentDirectory | None = None,
    ):
        """Initialize with an access engine and an enrolment directory."""
        self._access_control = access_control or AccessControlService()
        self._enrolments = enrolments if enrolments is not None else EnrolmentDirectory()

    @property
    def access_control(self) -> AccessControlService:
        return self._access_control

    @property
    def enrolments(self) -> EnrolmentDirectory:
        return self._enrolments

    # ==========================================================================
    # Access
    # ==========================================================================

    def check_content_access(
        self,
        student: Student,
        course: Course,
        content_id: str,
        access_time: datetime,
    ) -> AccessResult:
        """Check if a student can access a content item.

        Args:
            student: Student attempting access
            course: Course the content belongs to
            content_id: Requested content item
            access_time: Instant of the attempt

        Returns:
            AccessResult; "No active enrolment found" when the student has no
            enrolment on the course active at access_time
        """
        enrolment = self._enrolments.find_active(student, course, access_time)

        if enrolment is None:
            result = AccessResult.denied(AccessReason.NO_ACTIVE_ENROLMENT)
        else:
            result = self._access_control.can_access(
                student, content_id, course, enrolment, access_time
            )

        logger.info(
            "content_access_checked",
            student_id=student.id,
            course_id=course.id,
            content_id=content_id,
            access_time=access_time.isoformat(),
            allowed=result.allowed,
            reason=result.reason,
        )
        return result

    def get_accessible_content(
        self,
        student: Student,
        course: Course,
        access_time: datetime,
    ) -> list[ContentItem]:
        """Get all content a student can access at access_time."""
        enrolment = self._enrolments.find_active(student, course, access_time)

        if enrolment is None:
            items: list[ContentItem] = []
        else:
            items = self._access_control.get_accessible_content(
                student, course, enrolment, access_time
            )

        logger.info(
            "accessible_content_listed",
            student_id=student.id,
            course_id=course.id,
            access_time=access_time.isoformat(),
            enrolled=enrolment is not None,
            count=len(items),
        )
        return items

    # ==========================================================================
    # Enrolment Management
    # ==========================================================================

    def create_enrolment(
        self,
        enrolment_id: str,
        student: Student,
        course: Course,
        start_at: datetime,
        end_at: datetime,
    ) -> bool:
        """Enrol a student on a course for [start_at, end_at].

        Returns:
            Always True; creation cannot fail
        """
        self._enrolments.create(enrolment_id, student, course, start_at, end_at)

        logger.info(
            "enrolment_created",
            enrolment_id=enrolment_id,
            student_id=student.id,
            course_id=course.id,
            start_at=start_at.isoformat(),
            end_at=end_at.isoformat(),
        )
        return True

    def update_enrolment_end_date(self, enrolment_id: str, new_end: datetime) -> bool:
        """Correct an enrolment's end instant.

        Returns:
            True if updated, False if the enrolment does not exist
        """
        updated = self._enrolments.update_end_date(enrolment_id, new_end)

        if updated:
            logger.info(
                "enrolment_end_date_updated",
                enrolment_id=enrolment_id,
                new_end=new_end.isoformat(),
            )
        else:
            logger.warning("enrolment_not_found", enrolment_id=enrolment_id)

        return updated
