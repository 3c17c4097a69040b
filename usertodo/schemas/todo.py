from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from usertodo.utils.timestamps import iso_utc


class TodoIn(BaseModel):
    user_id: Optional[int] = None
    title: str = Field(..., max_length=255)
    description: Optional[str] = None


class TodoOut(BaseModel):
    id: int
    user_id: Optional[int] = None
    title: str
    description: Optional[str] = None
    is_completed: bool = False
    due_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: Optional[datetime]) -> Optional[str]:
        return iso_utc(value)
