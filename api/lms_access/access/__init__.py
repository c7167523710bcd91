"""Content access module.

Handles time-windowed content access:
- AccessControlService: ordered rule chain producing an AccessResult
- LMSService: active-enrolment lookup combined with the rule chain
- AccessReason: fixed reason texts
"""

from .engine import AccessControlService
from .models import AccessReason, AccessResult
from .service import LMSService


__all__ = [
    "AccessControlService",
    "AccessReason",
    "AccessResult",
    "LMSService",
]
