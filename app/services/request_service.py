"""
Volunteer requests and the post capacity counter they consume.

Creating a request takes one slot from the referenced post, withdrawing it
gives the slot back. The two writes land on different collections, so each
path is ordered to leave nothing half-done:

* create: insert the request (the unique index rejects duplicates), then
  decrement the post only while it still has capacity; if that fails the
  request is removed again.
* withdraw: delete the request, and only when something was deleted give
  the slot back to the post named by the caller.
"""
import logging

from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from ..db import MongoStore
from ..errors import AlreadyApplied, Conflict, NotFound
from ..models.request_model import VolunteerRequestCreate
from ..schemas import DeleteResult, InsertResult
from ..utils import serialize_docs, to_object_id

logger = logging.getLogger(__name__)


def list_by_volunteer(store: MongoStore, email: str) -> list[dict]:
    return serialize_docs(store.requests.find({"volunteer_email": email}))


def create_request(store: MongoStore, data: VolunteerRequestCreate) -> InsertResult:
    post_oid = to_object_id(data.postId)
    doc = data.model_dump()

    try:
        result = store.requests.insert_one(doc)
    except DuplicateKeyError:
        logger.info("%s already applied to post %s", data.volunteer_email, data.postId)
        raise AlreadyApplied()

    post = store.posts.find_one_and_update(
        {"_id": post_oid, "numberOfVolunteer": {"$gt": 0}},
        {"$inc": {"numberOfVolunteer": -1}},
        return_document=ReturnDocument.AFTER,
    )
    if post is None:
        store.requests.delete_one({"_id": result.inserted_id})
        if store.posts.find_one({"_id": post_oid}, {"_id": 1}) is None:
            raise NotFound("post not found")
        logger.warning("Post %s has no volunteer slots left", data.postId)
        raise Conflict("no volunteer slots left")

    logger.info(
        "Request %s by %s on post %s, %s slots left",
        result.inserted_id, data.volunteer_email, data.postId, post["numberOfVolunteer"],
    )
    return InsertResult.from_result(result)


def delete_request(store: MongoStore, request_id: str, post_id: str | None) -> DeleteResult:
    """Withdraw ``request_id`` and return its slot to ``post_id``."""
    request_oid = to_object_id(request_id)
    post_oid = to_object_id(post_id)

    result = store.requests.delete_one({"_id": request_oid})
    if result.deleted_count:
        store.posts.update_one({"_id": post_oid}, {"$inc": {"numberOfVolunteer": 1}})
        logger.info("Withdrew request %s, slot returned to post %s", request_id, post_id)
    return DeleteResult.from_result(result)
