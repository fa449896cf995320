from pydantic import BaseModel, ConfigDict, Field

from taskboard.app.models import Record


class RecordOut(BaseModel):
    """One task as it appears in /list and in the snapshot file."""

    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(alias="ID")
    task: str = Field(alias="Task")
    done: bool = Field(alias="Done")

    @classmethod
    def from_record(cls, record: Record) -> "RecordOut":
        return cls(id=record.id, task=record.description, done=record.done)
