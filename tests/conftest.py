import mongomock
import pytest
from fastapi.testclient import TestClient

from app.db import MongoStore
from app.main import create_app
from app.utils import create_access_token

ORGANIZER = "organizer@example.com"
VOLUNTEER = "volunteer@example.com"


@pytest.fixture(name="store")
def store_fixture():
    """
    A store backed by an in-memory mongomock client, fresh for each test.
    """
    return MongoStore(client=mongomock.MongoClient(), db_name="volunize-test")


@pytest.fixture(name="client")
def client_fixture(store: MongoStore):
    app = create_app(store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(name="login")
def login_fixture(client: TestClient):
    """Put a signed token for ``email`` into the client's cookie jar."""
    def _login(email: str = ORGANIZER) -> str:
        client.cookies.set("token", create_access_token({"email": email}))
        return email
    return _login


@pytest.fixture(name="make_post")
def make_post_fixture(store: MongoStore):
    def _make_post(**fields) -> str:
        doc = {
            "title": "Park Cleanup",
            "category": "Environment",
            "location": "Dhaka",
            "numberOfVolunteer": 5,
            "photo_url": "https://example.com/p.jpg",
            "description": "Pick up litter",
            "deadline": "2026-11-01",
            "organizer_Email": ORGANIZER,
            "organizer_Name": "Org",
        }
        doc.update(fields)
        return str(store.posts.insert_one(doc).inserted_id)
    return _make_post
