from typing import Optional

from fastapi import APIRouter, Depends, Query

from .. import schemas
from ..db import MongoStore, get_store
from ..models.post_model import PostCreate, PostUpdate
from ..services import post_service
from ..services.auth_service import verify_email
from ..services.post_query import build_post_query

router = APIRouter(tags=["posts"])


# -------------------------
#   Public Endpoints
# -------------------------

@router.get("/posts", response_model=list[dict])
def preview_posts(store: MongoStore = Depends(get_store)):
    """Soonest-deadline posts for the landing page."""
    return post_service.list_preview(store)


@router.get("/allPosts", response_model=list[dict])
def all_posts(
    size: Optional[str] = None,
    page: Optional[str] = None,
    search: Optional[str] = None,
    sortField: Optional[str] = None,
    sortOrder: Optional[str] = None,
    category: Optional[str] = None,
    minVolunteers: Optional[str] = None,
    maxVolunteers: Optional[str] = None,
    store: MongoStore = Depends(get_store),
):
    query = build_post_query(
        search=search,
        category=category,
        min_volunteers=minVolunteers,
        max_volunteers=maxVolunteers,
        sort_field=sortField,
        sort_order=sortOrder,
        page=page,
        size=size,
    )
    return post_service.list_posts(store, query)


@router.get("/post-count", response_model=schemas.CountOut)
def post_count(search: Optional[str] = Query(default=None), store: MongoStore = Depends(get_store)):
    return post_service.count_posts(store, search)


# -------------------------
#   Organizer Endpoints
# -------------------------

@router.get("/post", response_model=list[dict])
def my_posts(user: dict = Depends(verify_email), store: MongoStore = Depends(get_store)):
    return post_service.list_by_organizer(store, user["email"])


@router.get("/post/{post_id}", response_model=Optional[dict])
def get_post(post_id: str, user: dict = Depends(verify_email), store: MongoStore = Depends(get_store)):
    return post_service.get_post(store, post_id)


@router.post("/post", response_model=schemas.InsertResult)
def create_post(post: PostCreate, user: dict = Depends(verify_email), store: MongoStore = Depends(get_store)):
    return post_service.create_post(store, post)


@router.put("/post/{post_id}", response_model=schemas.UpdateResult)
def update_post(
    post_id: str,
    post: PostUpdate,
    user: dict = Depends(verify_email),
    store: MongoStore = Depends(get_store),
):
    return post_service.update_post(store, post_id, post)


@router.delete("/post/{post_id}", response_model=schemas.DeleteResult)
def delete_post(post_id: str, user: dict = Depends(verify_email), store: MongoStore = Depends(get_store)):
    return post_service.delete_post(store, post_id)
