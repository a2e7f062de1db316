from jose import jwt
from bson import ObjectId
from bson.errors import InvalidId
from datetime import datetime, timedelta, timezone
from typing import Any

from .config import settings
from .errors import BadRequest


# JWT helpers
def create_access_token(data: dict, days: int | None = None) -> str:
    """Return a signed JWT carrying the submitted identity claims."""
    exp_days = days if days is not None else settings.ACCESS_TOKEN_EXPIRE_DAYS
    expire = datetime.now(timezone.utc) + timedelta(days=exp_days)
    payload = data.copy()
    payload.update({"exp": int(expire.timestamp())})
    return jwt.encode(payload, settings.ACCESS_TOKEN_SECRET, algorithm=settings.ALGORITHM)


def decode_token(token: str) -> dict:
    """Decode and validate a JWT, raising JWTError on failure."""
    return jwt.decode(token, settings.ACCESS_TOKEN_SECRET, algorithms=[settings.ALGORITHM])


def to_object_id(value: str | None) -> ObjectId:
    # ObjectId(None) would mint a fresh id
    if value is None:
        raise BadRequest("invalid id")
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise BadRequest("invalid id")


def serialize_doc(doc: dict[str, Any] | None) -> dict[str, Any] | None:
    if doc is None:
        return None
    out = dict(doc)
    if isinstance(out.get("_id"), ObjectId):
        out["_id"] = str(out["_id"])
    return out


def serialize_docs(docs) -> list[dict[str, Any]]:
    return [serialize_doc(d) for d in docs]
