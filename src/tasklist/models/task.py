"""Task domain model."""

from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """A single to-do entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., gt=0)
    title: str
    description: str = ""
    completed: bool = False
    # Refreshed on every edit, so it reads as "last modified" in the UI
    date_created: str = Field(default="", alias="dateCreated")

    def to_json(self) -> str:
        """Serialize to the JSON document stored under the task's key."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: str | bytes) -> "Task":
        """Parse a stored JSON document.

        Raises:
            pydantic.ValidationError: If the document is malformed or
                missing required fields (a subclass of ValueError).
        """
        return cls.model_validate_json(data)

    def with_completed(self, completed: bool) -> "Task":
        """Copy of this task with a different completion flag."""
        return self.model_copy(update={"completed": completed})

    def with_content(self, title: str, description: str, date_created: str) -> "Task":
        """Copy of this task with edited text; id and completed carry over."""
        return self.model_copy(
            update={
                "title": title,
                "description": description,
                "date_created": date_created,
            }
        )

    def matches(self, search_term: str) -> bool:
        """Case-insensitive substring match against title or description."""
        if not search_term:
            return True
        needle = search_term.lower()
        return needle in self.title.lower() or needle in self.description.lower()
