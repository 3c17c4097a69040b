from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from usertodo.utils.timestamps import iso_utc


class UserIn(BaseModel):
    """Body of ``POST /users`` and ``PUT /users/{id}``.

    Optional fields left out of an update body come through as ``None`` and
    overwrite the stored value.
    """

    name: str = Field(..., max_length=100)
    email: str = Field(..., max_length=150)
    age: Optional[int] = None
    phone: Optional[str] = Field(None, max_length=15)
    address: Optional[str] = None


class UserOut(BaseModel):
    id: int
    name: str
    email: str
    age: Optional[int] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)

    @field_serializer("created_at", "updated_at")
    def serialize_timestamp(self, value: Optional[datetime]) -> Optional[str]:
        return iso_utc(value)
