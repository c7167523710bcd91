"""Tests for the Enrolment entity."""

from datetime import UTC, datetime, timedelta

from lms_access.courses.models import Course
from lms_access.enrolments.models import Enrolment
from lms_access.students.models import Student


START = datetime(2025, 5, 1, tzinfo=UTC)
END = datetime(2025, 5, 30, tzinfo=UTC)
EPSILON = timedelta(microseconds=1)


class TestIsActiveAt:
    """Tests for the closed activity interval."""

    def test_endpoints_are_inclusive(self, emma_enrolment: Enrolment) -> None:
        """Both start and end instants should count as active."""
        assert emma_enrolment.is_active_at(START) is True
        assert emma_enrolment.is_active_at(END) is True

    def test_outside_interval_is_inactive(self, emma_enrolment: Enrolment) -> None:
        """Instants just outside the interval should be inactive."""
        assert emma_enrolment.is_active_at(START - EPSILON) is False
        assert emma_enrolment.is_active_at(END + EPSILON) is False

    def test_inside_interval_is_active(self, emma_enrolment: Enrolment) -> None:
        """Instants strictly inside should be active."""
        assert emma_enrolment.is_active_at(datetime(2025, 5, 15, 10, 1, tzinfo=UTC)) is True

    def test_inverted_interval_is_never_active(
        self, emma: Student, biology_course: Course
    ) -> None:
        """With end before start, no instant satisfies the interval."""
        enrolment = Enrolment(
            id="broken",
            student=emma,
            course=biology_course,
            start_at=END,
            end_at=START,
        )

        for at in (START, datetime(2025, 5, 15, tzinfo=UTC), END):
            assert enrolment.is_active_at(at) is False


class TestUpdateEndDate:
    """Tests for end date corrections."""

    def test_shortening_takes_effect(self, emma_enrolment: Enrolment) -> None:
        """After shortening, instants past the new end should be inactive."""
        new_end = datetime(2025, 5, 20, tzinfo=UTC)

        emma_enrolment.update_end_date(new_end)

        assert emma_enrolment.end_at == new_end
        assert emma_enrolment.is_active_at(new_end) is True
        assert emma_enrolment.is_active_at(datetime(2025, 5, 21, tzinfo=UTC)) is False

    def test_extending_takes_effect(self, emma_enrolment: Enrolment) -> None:
        """After extending, instants up to the new end should be active."""
        emma_enrolment.update_end_date(datetime(2025, 6, 30, tzinfo=UTC))

        assert emma_enrolment.is_active_at(datetime(2025, 6, 15, tzinfo=UTC)) is True

    def test_start_is_unchanged(self, emma_enrolment: Enrolment) -> None:
        """Only the end instant should change."""
        emma_enrolment.update_end_date(datetime(2025, 5, 20, tzinfo=UTC))

        assert emma_enrolment.start_at == START


def test_to_dict(emma_enrolment: Enrolment) -> None:
    """Serialization should reference student and course by ID."""
    assert emma_enrolment.to_dict() == {
        "id": "7654",
        "student_id": "1342",
        "course_id": "5874",
        "start_at": "2025-05-01T00:00:00+00:00",
        "end_at": "2025-05-30T00:00:00+00:00",
    }
