"""Pydantic schemas for the gateway.

Request/Response models for:
- Checking access to a content item
- Listing accessible content
- Creating enrolments and updating their end date
"""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from lms_access.courses.models import ContentItem, ContentType
from lms_access.utils.instants import ensure_utc_aware


class _InstantRequest(BaseModel):
    """Base for requests carrying timestamps; naive values are read as UTC."""

    @field_validator("*", mode="after")
    @classmethod
    def _utc_aware(cls, value: object) -> object:
        if isinstance(value, datetime):
            return ensure_utc_aware(value)
        return value


# ==============================================================================
# Request Schemas
# ==============================================================================


class CheckAccessRequest(_InstantRequest):
    """Request to check access to one content item."""

    student_id: str = Field(..., min_length=1, description="Student attempting access")
    course_id: str = Field(..., min_length=1, description="Course of the content")
    content_id: str = Field(..., min_length=1, description="Requested content item")
    access_time: datetime = Field(..., description="Instant of the attempt")


class AccessibleContentQuery(_InstantRequest):
    """Query parameters for listing accessible content."""

    student_id: str = Field(..., min_length=1, description="Student to list for")
    time: datetime = Field(..., description="Instant to evaluate at")


class CreateEnrolmentRequest(_InstantRequest):
    """Request to enrol a student on a course."""

    enrolment_id: str | None = Field(
        None, min_length=1, description="Enrolment ID (generated when omitted)"
    )
    student_id: str = Field(..., min_length=1, description="Student to enrol")
    course_id: str = Field(..., min_length=1, description="Course to enrol on")
    start_date: datetime = Field(..., description="First instant of the enrolment")
    end_date: datetime = Field(..., description="Last instant of the enrolment")


class UpdateEnrolmentRequest(_InstantRequest):
    """Request to change an enrolment's end date."""

    end_date: datetime = Field(..., description="New last instant of the enrolment")


# ==============================================================================
# Response Schemas
# ==============================================================================


class CheckAccessResponse(BaseModel):
    """Access decision for one content item."""

    allowed: bool
    reason: str
    timestamp: str = Field(..., description="Evaluated instant, ISO 8601")
    student_id: str
    course_id: str
    content_id: str


class ContentItemSummary(BaseModel):
    """Content item as listed to clients."""

    id: str
    title: str
    type: ContentType

    @classmethod
    def from_item(cls, item: ContentItem) -> "ContentItemSummary":
        """Create summary from ContentItem entity."""
        return cls(id=item.id, title=item.title, type=item.content_type)


class AccessibleContentResponse(BaseModel):
    """Content accessible at an instant."""

    accessible_content: list[ContentItemSummary]
    total_count: int
    timestamp: str
    student_id: str
    course_id: str


class CreateEnrolmentResponse(BaseModel):
    """Result of creating an enrolment."""

    success: bool
    enrolment_id: str
    student_id: str
    course_id: str
    start_date: str
    end_date: str


class UpdateEnrolmentResponse(BaseModel):
    """Result of updating an enrolment's end date."""

    success: bool
    enrolment_id: str
    new_end_date: str
    message: str = "Enrolment updated successfully"


class ErrorDetail(BaseModel):
    """One field-level validation problem."""

    field: str
    message: str
