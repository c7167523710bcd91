"""Course and content models.

A course has a start instant, an optional end instant and an ordered set of
content items. Each content item belongs to one of a closed set of types, and
the type decides when the item becomes available:
- LESSON: from its own scheduled instant onwards
- HOMEWORK: from the course start onwards
- PREP_MATERIAL: from the course start onwards
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class ContentType(str, Enum):
    """Course content type."""

    LESSON = "lesson"
    HOMEWORK = "homework"
    PREP_MATERIAL = "prep_material"


# Types whose availability is tied to the course start
COURSE_START_GATED_TYPES = frozenset({ContentType.HOMEWORK, ContentType.PREP_MATERIAL})


# ==============================================================================
# Content
# ==============================================================================


@dataclass(frozen=True)
class ContentItem:
    """A single piece of course content."""

    id: str
    title: str
    content_type: ContentType
    scheduled_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.content_type == ContentType.LESSON and self.scheduled_at is None:
            raise ValueError(f"Lesson {self.id} requires a scheduled time")

    def is_available_at(self, current_time: datetime, course_start: datetime) -> bool:
        """Check if the item can be viewed at current_time.

        Args:
            current_time: Instant of the access attempt
            course_start: Start instant of the owning course

        Returns:
            True if the item's availability rule holds
        """
        if self.content_type == ContentType.LESSON:
            return current_time >= self.scheduled_at
        if self.content_type in COURSE_START_GATED_TYPES:
            return current_time >= course_start
        raise ValueError(f"Unknown content type: {self.content_type}")

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "type": self.content_type.value,
            "scheduled_at": self.scheduled_at.isoformat()
            if self.scheduled_at
            else None,
        }


# ==============================================================================
# Course
# ==============================================================================


@dataclass
class Course:
    """A course with a scheduling window and its content."""

    id: str
    title: str
    start_at: datetime
    end_at: datetime | None = None
    _content: dict[str, ContentItem] = field(
        default_factory=dict, init=False, repr=False
    )

    def add_content(self, item: ContentItem) -> None:
        """Add an item, replacing any existing item with the same ID in place."""
        self._content[item.id] = item

    def get_content(self, content_id: str) -> ContentItem | None:
        """Get a content item by ID."""
        return self._content.get(content_id)

    def all_content(self) -> list[ContentItem]:
        """Get all content items in the order they were first added."""
        return list(self._content.values())

    def has_started_at(self, at: datetime) -> bool:
        """Check if the course has started at the given instant."""
        return at >= self.start_at

    def has_ended_at(self, at: datetime) -> bool:
        """Check if the course has ended. The end instant itself still counts."""
        return self.end_at is not None and at > self.end_at

    def is_running_at(self, at: datetime) -> bool:
        """Check if the course has started and not yet ended."""
        return self.has_started_at(at) and not self.has_ended_at(at)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "start_at": self.start_at.isoformat(),
            "end_at": self.end_at.isoformat() if self.end_at else None,
            "content": [item.to_dict() for item in self.all_content()],
        }


# ==============================================================================
# Factory Functions
# ==============================================================================


def create_lesson(content_id: str, title: str, scheduled_at: datetime) -> ContentItem:
    """Create a lesson available from its scheduled instant."""
    return ContentItem(
        id=content_id,
        title=title,
        content_type=ContentType.LESSON,
        scheduled_at=scheduled_at,
    )


def create_homework(content_id: str, title: str) -> ContentItem:
    """Create homework available from the course start."""
    return ContentItem(id=content_id, title=title, content_type=ContentType.HOMEWORK)


def create_prep_material(content_id: str, title: str) -> ContentItem:
    """Create preparation material available from the course start."""
    return ContentItem(
        id=content_id, title=title, content_type=ContentType.PREP_MATERIAL
    )
