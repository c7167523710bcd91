"""Shared fixtures for the LMS access tests."""

import logging
from collections.abc import Iterator
from datetime import UTC, datetime

import pytest
import structlog

from lms_access.access.service import LMSService
from lms_access.catalog.service import (
    REFERENCE_STUDENT_ID,
    CourseCatalog,
    build_reference_course,
    load_reference_catalog,
)
from lms_access.config.settings import Settings
from lms_access.courses.models import Course
from lms_access.enrolments.models import Enrolment
from lms_access.gateway.controller import ContentAccessController
from lms_access.students.models import Student


@pytest.fixture
def settings() -> Settings:
    """Test settings, isolated from the environment's .env."""
    return Settings(_env_file=None, environment="testing")


@pytest.fixture
def emma() -> Student:
    """Reference student."""
    return Student(id=REFERENCE_STUDENT_ID, name="Emma")


@pytest.fixture
def biology_course() -> Course:
    """A-Level Biology: 13/05/2025 to 12/06/2025, lesson 8001, homework 8002,
    prep material 8003."""
    return build_reference_course()


@pytest.fixture
def emma_enrolment(emma: Student, biology_course: Course) -> Enrolment:
    """Emma's enrolment, 01/05/2025 to 30/05/2025."""
    return Enrolment(
        id="7654",
        student=emma,
        course=biology_course,
        start_at=datetime(2025, 5, 1, tzinfo=UTC),
        end_at=datetime(2025, 5, 30, tzinfo=UTC),
    )


@pytest.fixture
def lms_service() -> LMSService:
    """Fresh service with an empty enrolment directory."""
    return LMSService()


@pytest.fixture
def catalog() -> CourseCatalog:
    """Catalog holding the reference student and course."""
    return load_reference_catalog()


@pytest.fixture
def controller(
    lms_service: LMSService, catalog: CourseCatalog, settings: Settings
) -> ContentAccessController:
    """Gateway over a fresh service and the reference catalog."""
    return ContentAccessController(
        lms_service=lms_service, catalog=catalog, settings=settings
    )


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Undo global logging configuration made by a test."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
