# Core infrastructure
from lms_access.core.context import (
    RequestContext,
    clear_context,
    get_context,
    get_course_id,
    get_request_id,
    get_student_id,
    set_course_id,
    set_request_id,
    set_student_id,
)
from lms_access.core.logging import configure_structlog, get_logger


__all__ = [
    "RequestContext",
    "clear_context",
    "configure_structlog",
    "get_context",
    "get_course_id",
    "get_logger",
    "get_request_id",
    "get_student_id",
    "set_course_id",
    "set_request_id",
    "set_student_id",
]
