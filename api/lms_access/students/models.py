"""Student entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Student:
    """A learner who can be enrolled on courses."""

    id: str
    name: str

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"id": self.id, "name": self.name}
