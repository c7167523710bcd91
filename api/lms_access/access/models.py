"""Access decision result types."""

from dataclasses import dataclass
from enum import Enum


class AccessReason(str, Enum):
    """Fixed reason texts attached to every access decision.

    Callers match on the exact text, so values must not change.
    """

    ENROLMENT_INACTIVE = "Student enrolment is not active"
    COURSE_NOT_STARTED = "Course has not started yet"
    CONTENT_NOT_FOUND = "Content not found"
    CONTENT_NOT_AVAILABLE = "Content is not yet available"
    GRANTED = "Access granted"
    NO_ACTIVE_ENROLMENT = "No active enrolment found"


@dataclass(frozen=True)
class AccessResult:
    """Outcome of an access check."""

    allowed: bool
    reason: str

    @classmethod
    def granted(cls) -> "AccessResult":
        """Create an allowing result."""
        return cls(allowed=True, reason=AccessReason.GRANTED.value)

    @classmethod
    def denied(cls, reason: AccessReason) -> "AccessResult":
        """Create a denying result with the given reason."""
        return cls(allowed=False, reason=reason.value)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"allowed": self.allowed, "reason": self.reason}
