"""LMS content access service.

Decides whether a student may view course content at a given instant, from
the student's enrolment window, the course schedule and per-content-type
availability rules.
"""

from lms_access.access import AccessReason, AccessResult, LMSService


__version__ = "0.1.0"

__all__ = ["AccessReason", "AccessResult", "LMSService", "__version__"]
