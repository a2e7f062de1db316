import logging

from bson import ObjectId
from fastapi import Request
from pymongo import ASCENDING, MongoClient
from pymongo.errors import OperationFailure
from pymongo.server_api import ServerApi

from .config import settings

logger = logging.getLogger(__name__)


class MongoStore:
    """Owns the Mongo client and hands out the two collections."""

    def __init__(self, uri: str | None = None, db_name: str | None = None, client=None):
        self.uri = uri or settings.MONGO_URI
        self.db_name = db_name or settings.DB_NAME
        self.client = client
        self._owns_client = client is None

    def connect(self, with_indexes: bool = True) -> "MongoStore":
        if self.client is None:
            self.client = MongoClient(self.uri, server_api=ServerApi("1", strict=True, deprecation_errors=True))
        if with_indexes:
            self.ensure_indexes()
        logger.info("Connected to database %s", self.db_name)
        return self

    def close(self) -> None:
        if self.client is not None and self._owns_client:
            self.client.close()
            self.client = None
        logger.info("Closed database connection")

    @property
    def db(self):
        if self.client is None:
            raise RuntimeError("MongoStore used before connect()")
        return self.client[self.db_name]

    @property
    def posts(self):
        return self.db[settings.POST_COLLECTION]

    @property
    def requests(self):
        return self.db[settings.REQUEST_COLLECTION]

    def ensure_indexes(self) -> None:
        # one request per volunteer and post
        try:
            self.requests.create_index(
                [("volunteer_email", ASCENDING), ("postId", ASCENDING)],
                unique=True,
                name="volunteer_post_unique",
            )
        except OperationFailure:
            logger.error(
                "Cannot build the unique (volunteer_email, postId) index on %s: "
                "duplicate requests exist. Run `python dedupe_requests.py` first.",
                settings.REQUEST_COLLECTION,
            )
            raise
        self.posts.create_index([("deadline", ASCENDING)], name="deadline_asc")
        self.posts.create_index([("organizer_Email", ASCENDING)], name="organizer_email")

    def drop_duplicate_requests(self) -> int:
        """
        Keep the oldest request per (volunteer_email, postId) and delete the
        rest, returning each removed request's slot to its post.
        """
        seen = set()
        removed = 0
        for doc in list(self.requests.find({}).sort("_id", ASCENDING)):
            key = (doc.get("volunteer_email"), doc.get("postId"))
            if key not in seen:
                seen.add(key)
                continue
            self.requests.delete_one({"_id": doc["_id"]})
            removed += 1
            if ObjectId.is_valid(doc.get("postId")):
                self.posts.update_one(
                    {"_id": ObjectId(doc["postId"])},
                    {"$inc": {"numberOfVolunteer": 1}},
                )
        if removed:
            logger.info("Removed %s duplicate requests", removed)
        return removed


def get_store(request: Request) -> MongoStore:
    return request.app.state.store
