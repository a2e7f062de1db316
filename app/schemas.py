from pydantic import BaseModel, ConfigDict
from typing import Optional


class Identity(BaseModel):
    """Payload submitted to ``/jwt``, signed exactly as received."""
    model_config = ConfigDict(extra="allow")

    email: str


class Success(BaseModel):
    success: bool = True


class CountOut(BaseModel):
    count: int


class InsertResult(BaseModel):
    acknowledged: bool
    insertedId: str

    @classmethod
    def from_result(cls, result):
        return cls(acknowledged=result.acknowledged, insertedId=str(result.inserted_id))


class UpdateResult(BaseModel):
    acknowledged: bool
    matchedCount: int
    modifiedCount: int
    upsertedId: Optional[str] = None

    @classmethod
    def from_result(cls, result):
        upserted = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matchedCount=result.matched_count,
            modifiedCount=result.modified_count,
            upsertedId=str(upserted) if upserted is not None else None,
        )


class DeleteResult(BaseModel):
    acknowledged: bool
    deletedCount: int

    @classmethod
    def from_result(cls, result):
        return cls(acknowledged=result.acknowledged, deletedCount=result.deleted_count)
