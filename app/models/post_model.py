from pydantic import BaseModel, ConfigDict
from typing import Any, Optional

# Fields replaced wholesale by PUT /post/{id}
POST_FIELDS = (
    "title",
    "category",
    "location",
    "numberOfVolunteer",
    "photo_url",
    "description",
    "deadline",
    "organizer_Email",
    "organizer_Name",
)


class PostCreate(BaseModel):
    """Any JSON object; stored exactly as submitted."""
    model_config = ConfigDict(extra="allow")

    def as_document(self) -> dict:
        return dict(self.model_extra or {})


class PostUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    numberOfVolunteer: Optional[int] = None
    photo_url: Optional[str] = None
    description: Optional[str] = None
    deadline: Optional[Any] = None
    organizer_Email: Optional[str] = None
    organizer_Name: Optional[str] = None

    def as_set(self) -> dict:
        return {name: getattr(self, name) for name in POST_FIELDS}
