"""Call context management using contextvars.

Every gateway call gets a request ID, and optionally the student and course it
concerns. Log events emitted anywhere below the gateway pick these values up
without them being passed around explicitly.
"""

from contextvars import ContextVar, Token
from typing import Any
from uuid import uuid4


request_id_var: ContextVar[str] = ContextVar("request_id", default="")
student_id_var: ContextVar[str | None] = ContextVar("student_id", default=None)
course_id_var: ContextVar[str | None] = ContextVar("course_id", default=None)


def generate_request_id() -> str:
    """Generate a new unique request ID."""
    return str(uuid4())


def get_request_id() -> str:
    """Get the current request ID."""
    return request_id_var.get()


def set_request_id(request_id: str | None = None) -> str:
    """Set the request ID for the current context.

    Args:
        request_id: Optional request ID. If not provided, generates a new one.

    Returns:
        The request ID that was set.
    """
    rid = request_id or generate_request_id()
    request_id_var.set(rid)
    return rid


def get_student_id() -> str | None:
    """Get the current student ID."""
    return student_id_var.get()


def set_student_id(student_id: str | None) -> None:
    """Set the student ID for the current context."""
    student_id_var.set(student_id)


def get_course_id() -> str | None:
    """Get the current course ID."""
    return course_id_var.get()


def set_course_id(course_id: str | None) -> None:
    """Set the course ID for the current context."""
    course_id_var.set(course_id)


def get_context() -> dict[str, Any]:
    """Get the non-empty context variables as a dictionary."""
    context: dict[str, Any] = {}

    request_id = get_request_id()
    if request_id:
        context["request_id"] = request_id

    student_id = get_student_id()
    if student_id:
        context["student_id"] = student_id

    course_id = get_course_id()
    if course_id:
        context["course_id"] = course_id

    return context


def clear_context() -> None:
    """Clear all context variables."""
    request_id_var.set("")
    student_id_var.set(None)
    course_id_var.set(None)


class RequestContext:
    """Context manager scoping a single gateway call.

    Usage:
        with RequestContext(student_id="1342") as ctx:
            logger.info("checking")  # includes request_id and student_id
            ctx.request_id
    """

    def __init__(
        self,
        request_id: str | None = None,
        student_id: str | None = None,
        course_id: str | None = None,
    ) -> None:
        self.request_id = request_id or generate_request_id()
        self.student_id = student_id
        self.course_id = course_id
        self._tokens: list[tuple[ContextVar, Token]] = []

    def __enter__(self) -> "RequestContext":
        """Enter context and set variables."""
        self._tokens.append((request_id_var, request_id_var.set(self.request_id)))
        if self.student_id is not None:
            self._tokens.append(
                (student_id_var, student_id_var.set(self.student_id))
            )
        if self.course_id is not None:
            self._tokens.append((course_id_var, course_id_var.set(self.course_id)))
        return self

    def bind(self, student_id: str | None = None, course_id: str | None = None) -> None:
        """Attach values learned after entering; restored on exit like the rest."""
        if student_id is not None:
            self.student_id = student_id
            self._tokens.append((student_id_var, student_id_var.set(student_id)))
        if course_id is not None:
            self.course_id = course_id
            self._tokens.append((course_id_var, course_id_var.set(course_id)))

    def __exit__(self, *_: object) -> None:
        """Exit context and restore previous values."""
        for var, token in reversed(self._tokens):
            var.reset(token)
        self._tokens.clear()
