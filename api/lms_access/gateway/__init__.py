"""Gateway module.

Translates request payloads into entity values, calls the LMS service and
formats results (or failures) as response payloads.
"""

from .controller import (
    ContentAccessController,
    CourseNotFoundError,
    EnrolmentNotFoundError,
    GatewayError,
    StudentNotFoundError,
)
from .schemas import (
    AccessibleContentQuery,
    AccessibleContentResponse,
    CheckAccessRequest,
    CheckAccessResponse,
    ContentItemSummary,
    CreateEnrolmentRequest,
    CreateEnrolmentResponse,
    UpdateEnrolmentRequest,
    UpdateEnrolmentResponse,
)


__all__ = [
    "AccessibleContentQuery",
    "AccessibleContentResponse",
    "CheckAccessRequest",
    "CheckAccessResponse",
    "ContentAccessController",
    "ContentItemSummary",
    "CourseNotFoundError",
    "CreateEnrolmentRequest",
    "CreateEnrolmentResponse",
    "EnrolmentNotFoundError",
    "GatewayError",
    "StudentNotFoundError",
    "UpdateEnrolmentRequest",
    "UpdateEnrolmentResponse",
]
