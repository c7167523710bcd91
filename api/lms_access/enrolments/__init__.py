"""Enrolment module.

Provides:
- Enrolment: closed [start, end] entitlement of a student to a course
- EnrolmentDirectory: keyed store with active-enrolment lookup
"""

from .directory import EnrolmentDirectory
from .models import Enrolment


__all__ = ["Enrolment", "EnrolmentDirectory"]
