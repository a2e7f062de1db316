import logging

from ..config import settings
from ..db import MongoStore
from ..models.post_model import PostCreate, PostUpdate
from ..schemas import CountOut, DeleteResult, InsertResult, UpdateResult
from ..utils import serialize_doc, serialize_docs, to_object_id
from .post_query import PostQuery, build_count_filter, build_preview_query

logger = logging.getLogger(__name__)


def _run(store: MongoStore, query: PostQuery) -> list[dict]:
    cursor = store.posts.find(query.filter)
    if query.sort:
        cursor = cursor.sort(query.sort)
    return serialize_docs(cursor.skip(query.skip).limit(query.limit))


def list_preview(store: MongoStore) -> list[dict]:
    return _run(store, build_preview_query(settings.PREVIEW_LIMIT))


def list_posts(store: MongoStore, query: PostQuery) -> list[dict]:
    return _run(store, query)


def count_posts(store: MongoStore, search: str | None) -> CountOut:
    return CountOut(count=store.posts.count_documents(build_count_filter(search)))


def list_by_organizer(store: MongoStore, email: str) -> list[dict]:
    return serialize_docs(store.posts.find({"organizer_Email": email}))


def get_post(store: MongoStore, post_id: str) -> dict | None:
    return serialize_doc(store.posts.find_one({"_id": to_object_id(post_id)}))


def create_post(store: MongoStore, data: PostCreate) -> InsertResult:
    result = store.posts.insert_one(data.as_document())
    logger.info("Created post %s", result.inserted_id)
    return InsertResult.from_result(result)


def update_post(store: MongoStore, post_id: str, data: PostUpdate) -> UpdateResult:
    result = store.posts.update_one({"_id": to_object_id(post_id)}, {"$set": data.as_set()})
    return UpdateResult.from_result(result)


def delete_post(store: MongoStore, post_id: str) -> DeleteResult:
    # requests pointing at this post are left in place
    result = store.posts.delete_one({"_id": to_object_id(post_id)})
    if result.deleted_count:
        logger.info("Deleted post %s", post_id)
    return DeleteResult.from_result(result)
