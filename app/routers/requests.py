from typing import Optional

from fastapi import APIRouter, Depends, Query

from .. import schemas
from ..db import MongoStore, get_store
from ..models.request_model import VolunteerRequestCreate
from ..services import request_service
from ..services.auth_service import verify_email

router = APIRouter(tags=["requests"])


@router.get("/allRequest", response_model=list[dict])
def my_requests(user: dict = Depends(verify_email), store: MongoStore = Depends(get_store)):
    return request_service.list_by_volunteer(store, user["email"])


@router.post("/request", response_model=schemas.InsertResult)
def apply(
    data: VolunteerRequestCreate,
    user: dict = Depends(verify_email),
    store: MongoStore = Depends(get_store),
):
    """Apply to a post; a second application for the same post is refused."""
    return request_service.create_request(store, data)


@router.delete("/request/{request_id}", response_model=schemas.DeleteResult)
def withdraw(
    request_id: str,
    post_id: Optional[str] = Query(default=None, alias="id"),
    user: dict = Depends(verify_email),
    store: MongoStore = Depends(get_store),
):
    # the path names the request, ?id= names the post that gets the slot back
    return request_service.delete_request(store, request_id, post_id)
