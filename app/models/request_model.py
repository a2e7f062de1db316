from pydantic import BaseModel, ConfigDict


class VolunteerRequestCreate(BaseModel):
    model_config = ConfigDict(extra="allow")

    volunteer_email: str
    postId: str
