"""Replay the reference enrolment scenario through the gateway.

Runs the A-Level Biology walkthrough (enrol Emma, check access before and
after the course starts, list content, shorten the enrolment, check again,
send an invalid request) and prints every request/response pair as JSON.

Usage:
    lms-access-demo
    python -m lms_access.demo
"""

import json
import sys
from typing import Any

from lms_access.access.service import LMSService
from lms_access.catalog.service import (
    REFERENCE_COURSE_ID,
    REFERENCE_HOMEWORK_ID,
    REFERENCE_PREP_MATERIAL_ID,
    REFERENCE_STUDENT_ID,
    load_reference_catalog,
)
from lms_access.config.settings import get_settings
from lms_access.core.logging import configure_structlog, get_logger
from lms_access.gateway.controller import ContentAccessController


logger = get_logger(__name__)


def _show(title: str, request: Any, response: dict[str, Any]) -> None:
    print(f"=== {title} ===")
    print("Request: " + json.dumps(request, indent=2))
    print("Response: " + json.dumps(response, indent=2))
    print()


def run_demo(controller: ContentAccessController) -> list[dict[str, Any]]:
    """Run the scenario and return the responses in order."""
    responses: list[dict[str, Any]] = []

    def step(title: str, request: Any, response: dict[str, Any]) -> dict[str, Any]:
        _show(title, request, response)
        responses.append(response)
        return response

    enrol_request = {
        "student_id": REFERENCE_STUDENT_ID,
        "course_id": REFERENCE_COURSE_ID,
        "start_date": "2025-05-01T00:00:00Z",
        "end_date": "2025-05-30T23:59:59Z",
    }
    enrolment = step(
        "1. Creating enrolment",
        enrol_request,
        controller.create_enrolment(enrol_request),
    )

    before_start = {
        "student_id": REFERENCE_STUDENT_ID,
        "course_id": REFERENCE_COURSE_ID,
        "content_id": REFERENCE_PREP_MATERIAL_ID,
        "access_time": "2025-05-01T00:00:00Z",
    }
    step(
        "2. Prep material before the course starts",
        before_start,
        controller.check_access(before_start),
    )

    after_start = {**before_start, "access_time": "2025-05-13T00:00:00Z"}
    step(
        "3. Prep material after the course starts",
        after_start,
        controller.check_access(after_start),
    )

    listing = {"student_id": REFERENCE_STUDENT_ID, "time": "2025-05-15T10:01:00Z"}
    step(
        "4. Accessible content",
        listing,
        controller.get_accessible_content(REFERENCE_COURSE_ID, listing),
    )

    update_request = {"end_date": "2025-05-20T23:59:59Z"}
    step(
        "5. Shortening the enrolment",
        {"enrolment_id": enrolment.get("enrolment_id"), **update_request},
        controller.update_enrolment(enrolment.get("enrolment_id", ""), update_request),
    )

    after_shortening = {
        "student_id": REFERENCE_STUDENT_ID,
        "course_id": REFERENCE_COURSE_ID,
        "content_id": REFERENCE_HOMEWORK_ID,
        "access_time": "2025-05-21T00:00:00Z",
    }
    step(
        "6. Homework after the enrolment was shortened",
        after_shortening,
        controller.check_access(after_shortening),
    )

    invalid = {"student_id": REFERENCE_STUDENT_ID}
    step(
        "7. Missing fields",
        invalid,
        controller.check_access(invalid),
    )

    return responses


def main() -> int:
    """Console entry point."""
    settings = get_settings()
    configure_structlog(settings)

    controller = ContentAccessController(
        lms_service=LMSService(),
        catalog=load_reference_catalog(),
        settings=settings,
    )

    logger.info("demo_started", app=settings.app_name, version=settings.app_version)
    run_demo(controller)
    logger.info("demo_finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
