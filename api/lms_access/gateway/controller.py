"""Payload-level adapter in front of the LMS service.

Each operation takes an already-decoded request payload (a dict, as parsed
from JSON) and returns a JSON-ready dict. Failures never escape as
exceptions; they are returned in a uniform envelope:

    {"error": true, "message": "...", "request_id": "...", ...}

with the operation's neutral value ("allowed": false, "accessible_content": []
or "success": false) and, for validation failures, a "details" list.
"""

from typing import Any
from uuid import uuid4

from pydantic import ValidationError

from lms_access.access.service import LMSService
from lms_access.catalog.service import CourseCatalog
from lms_access.config.settings import Settings, get_settings
from lms_access.core.context import RequestContext
from lms_access.core.logging import get_logger
from lms_access.courses.models import Course
from lms_access.students.models import Student
from lms_access.utils.instants import format_instant

from .schemas import (
    AccessibleContentQuery,
    AccessibleContentResponse,
    CheckAccessRequest,
    CheckAccessResponse,
    ContentItemSummary,
    CreateEnrolmentRequest,
    CreateEnrolmentResponse,
    ErrorDetail,
    UpdateEnrolmentRequest,
    UpdateEnrolmentResponse,
)


logger = get_logger(__name__)

# Length of the random part of generated enrolment IDs
_GENERATED_ID_LENGTH = 13


# ==============================================================================
# Custom Exceptions
# ==============================================================================


class GatewayError(Exception):
    """Base gateway error."""

    def __init__(self, message: str, code: str = "gateway_error"):
        self.message = message
        self.code = code
        super().__init__(message)


class StudentNotFoundError(GatewayError):
    """Student ID unknown to the catalog."""

    def __init__(self, student_id: str):
        super().__init__(f"Student not found: {student_id}", "student_not_found")


class CourseNotFoundError(GatewayError):
    """Course ID unknown to the catalog."""

    def __init__(self, course_id: str):
        super().__init__(f"Course not found: {course_id}", "course_not_found")


class EnrolmentNotFoundError(GatewayError):
    """Enrolment ID unknown to the directory."""

    def __init__(self, message: str = "Enrolment not found or update failed"):
        super().__init__(message, "enrolment_not_found")


# ==============================================================================
# Controller
# ==============================================================================


class ContentAccessController:
    """Translates request payloads to LMSService calls and back."""

    def __init__(
        self,
        lms_service: LMSService,
        catalog: CourseCatalog,
        settings: Settings | None = None,
    ):
        self.lms_service = lms_service
        self.catalog = catalog
        self.settings = settings or get_settings()

    def check_access(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Check if a student can access one content item.

        Payload: student_id, course_id, content_id, access_time.
        """
        with RequestContext() as ctx:
            try:
                request = CheckAccessRequest.model_validate(payload)
                ctx.bind(student_id=request.student_id, course_id=request.course_id)
                student = self._get_student(request.student_id)
                course = self._get_course(request.course_id)
            except (ValidationError, GatewayError) as e:
                return self._error_response(e, ctx.request_id, allowed=False)

            result = self.lms_service.check_content_access(
                student, course, request.content_id, request.access_time
            )

            return CheckAccessResponse(
                allowed=result.allowed,
                reason=result.reason,
                timestamp=format_instant(request.access_time),
                student_id=student.id,
                course_id=course.id,
                content_id=request.content_id,
            ).model_dump(mode="json")

    def get_accessible_content(
        self, course_id: str, query: dict[str, Any]
    ) -> dict[str, Any]:
        """List the content of a course a student can access.

        Query: student_id, time.
        """
        with RequestContext(course_id=course_id) as ctx:
            try:
                params = AccessibleContentQuery.model_validate(query)
                ctx.bind(student_id=params.student_id)
                student = self._get_student(params.student_id)
                course = self._get_course(course_id)
            except (ValidationError, GatewayError) as e:
                return self._error_response(
                    e, ctx.request_id, accessible_content=[]
                )

            items = self.lms_service.get_accessible_content(
                student, course, params.time
            )

            return AccessibleContentResponse(
                accessible_content=[ContentItemSummary.from_item(i) for i in items],
                total_count=len(items),
                timestamp=format_instant(params.time),
                student_id=student.id,
                course_id=course.id,
            ).model_dump(mode="json")

    def create_enrolment(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Enrol a student on a course.

        Payload: student_id, course_id, start_date, end_date and optionally
        enrolment_id.
        """
        with RequestContext() as ctx:
            try:
                request = CreateEnrolmentRequest.model_validate(payload)
                ctx.bind(student_id=request.student_id, course_id=request.course_id)
                student = self._get_student(request.student_id)
                course = self._get_course(request.course_id)
            except (ValidationError, GatewayError) as e:
                return self._error_response(e, ctx.request_id, success=False)

            enrolment_id = request.enrolment_id or self._generate_enrolment_id()
            success = self.lms_service.create_enrolment(
                enrolment_id,
                student,
                course,
                request.start_date,
                request.end_date,
            )

            return CreateEnrolmentResponse(
                success=success,
                enrolment_id=enrolment_id,
                student_id=student.id,
                course_id=course.id,
                start_date=format_instant(request.start_date),
                end_date=format_instant(request.end_date),
            ).model_dump(mode="json")

    def update_enrolment(
        self, enrolment_id: str, payload: dict[str, Any]
    ) -> dict[str, Any]:
        """Change an enrolment's end date.

        Payload: end_date.
        """
        with RequestContext() as ctx:
            try:
                request = UpdateEnrolmentRequest.model_validate(payload)
                if not self.lms_service.update_enrolment_end_date(
                    enrolment_id, request.end_date
                ):
                    raise EnrolmentNotFoundError()
            except (ValidationError, GatewayError) as e:
                return self._error_response(e, ctx.request_id, success=False)

            return UpdateEnrolmentResponse(
                success=True,
                enrolment_id=enrolment_id,
                new_end_date=format_instant(request.end_date),
            ).model_dump(mode="json")

    # ==========================================================================
    # Private Helpers
    # ==========================================================================

    def _get_student(self, student_id: str) -> Student:
        student = self.catalog.get_student(student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        return student

    def _get_course(self, course_id: str) -> Course:
        course = self.catalog.get_course(course_id)
        if course is None:
            raise CourseNotFoundError(course_id)
        return course

    def _generate_enrolment_id(self) -> str:
        return f"{self.settings.enrolment_id_prefix}{uuid4().hex[:_GENERATED_ID_LENGTH]}"

    def _error_response(
        self,
        exc: ValidationError | GatewayError,
        request_id: str,
        **neutral: Any,
    ) -> dict[str, Any]:
        """Wrap a failure in the error envelope."""
        response: dict[str, Any] = {"error": True, "request_id": request_id}

        if isinstance(exc, ValidationError):
            details = [
                ErrorDetail(
                    field=".".join(str(loc) for loc in err.get("loc", ())),
                    message=err.get("msg", "Invalid value"),
                )
                for err in exc.errors()
            ]
            response["message"] = _validation_message(exc)
            response["details"] = [d.model_dump() for d in details]
            logger.warning(
                "validation_error",
                errors=[d.model_dump() for d in details],
            )
        else:
            response["message"] = exc.message
            logger.warning("gateway_error", code=exc.code, message=exc.message)

        response.update(neutral)
        return response


def _validation_message(exc: ValidationError) -> str:
    """Summarize a validation failure, naming the first missing field."""
    for err in exc.errors():
        if err.get("type") == "missing" and err.get("loc"):
            return f"Missing required field: {err['loc'][0]}"
    return "Validation error"
