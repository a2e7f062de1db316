from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from app.db import MongoStore
from app.services import post_service

ORGANIZER = "organizer@example.com"


def _titles(response):
    return [p["title"] for p in response.json()]


def test_preview_returns_six_soonest_deadlines(client: TestClient, make_post):
    for day in range(10, 1, -1):
        make_post(title=f"Post {day:02d}", deadline=f"2026-11-{day:02d}")

    response = client.get("/posts")
    assert response.status_code == 200
    body = response.json()
    assert len(body) == 6
    deadlines = [p["deadline"] for p in body]
    assert deadlines == sorted(deadlines)
    assert deadlines[0] == "2026-11-02"
    assert all(isinstance(p["_id"], str) for p in body)


def test_all_posts_filters(client: TestClient, make_post):
    make_post(title="Beach Cleanup", category="Environment", numberOfVolunteer=3)
    make_post(title="beach party", category="Social", numberOfVolunteer=10)
    make_post(title="River Cleanup", category="environment", numberOfVolunteer=8)
    make_post(title="Tutoring", category="Education", numberOfVolunteer=1)

    response = client.get("/allPosts", params={"search": "BEACH", "sortField": "title"})
    assert _titles(response) == ["Beach Cleanup", "beach party"]

    response = client.get("/allPosts", params={"search": "", "category": "ENVIRON", "sortField": "title"})
    assert _titles(response) == ["Beach Cleanup", "River Cleanup"]

    response = client.get("/allPosts", params={"minVolunteers": "3", "maxVolunteers": "8", "sortField": "title"})
    assert _titles(response) == ["Beach Cleanup", "River Cleanup"]

    response = client.get(
        "/allPosts",
        params={"search": "cleanup", "category": "env", "minVolunteers": "5"},
    )
    assert _titles(response) == ["River Cleanup"]


def test_all_posts_sort_and_pagination(client: TestClient, make_post):
    for n in range(1, 8):
        make_post(title=f"Post {n}", numberOfVolunteer=n, deadline=f"2026-12-{n:02d}")

    response = client.get("/allPosts", params={"size": "3", "page": "1"})
    assert _titles(response) == ["Post 1", "Post 2", "Post 3"]

    response = client.get("/allPosts", params={"size": "3", "page": "3"})
    assert _titles(response) == ["Post 7"]

    response = client.get(
        "/allPosts",
        params={"size": "2", "page": "2", "sortField": "numberOfVolunteer", "sortOrder": "desc"},
    )
    assert _titles(response) == ["Post 5", "Post 4"]

    # page 0 behaves like the first page
    response = client.get("/allPosts", params={"size": "2", "page": "0"})
    assert _titles(response) == ["Post 1", "Post 2"]

    response = client.get("/allPosts")
    assert len(response.json()) == 7


def test_post_count_only_applies_search(client: TestClient, make_post):
    make_post(title="Beach Cleanup", category="Environment", numberOfVolunteer=1)
    make_post(title="Beach Walk", category="Health", numberOfVolunteer=50)
    make_post(title="Library Help", category="Education")

    assert client.get("/post-count").json() == {"count": 3}
    assert client.get("/post-count", params={"search": ""}).json() == {"count": 3}
    assert client.get("/post-count", params={"search": "beach"}).json() == {"count": 2}
    response = client.get(
        "/post-count",
        params={"search": "beach", "category": "Health", "minVolunteers": "10"},
    )
    assert response.json() == {"count": 2}


def test_create_then_get_round_trip(client: TestClient, login):
    login(ORGANIZER)
    post = {
        "title": "Soup Kitchen",
        "category": "Social Service",
        "location": "Khulna",
        "numberOfVolunteer": 4,
        "photo_url": "https://example.com/soup.jpg",
        "description": "Serve dinner",
        "deadline": "2026-12-24T18:00:00.000Z",
        "organizer_Email": ORGANIZER,
        "organizer_Name": "Org",
        "contact": "01700000000",
    }
    response = client.post("/post", params={"email": ORGANIZER}, json=post)
    assert response.status_code == 200
    created = response.json()
    assert created["acknowledged"] is True

    response = client.get(f"/post/{created['insertedId']}", params={"email": ORGANIZER})
    assert response.status_code == 200
    fetched = response.json()
    assert fetched.pop("_id") == created["insertedId"]
    assert fetched == post


def test_get_missing_post_returns_null(client: TestClient, login):
    login(ORGANIZER)
    response = client.get("/post/6566f0a1c2b3d4e5f6a7b8c9", params={"email": ORGANIZER})
    assert response.status_code == 200
    assert response.json() is None


def test_malformed_id_is_bad_request(client: TestClient, login):
    login(ORGANIZER)
    response = client.get("/post/not-an-id", params={"email": ORGANIZER})
    assert response.status_code == 400
    assert response.json() == {"message": "invalid id"}


def test_list_by_organizer(client: TestClient, login, make_post):
    make_post(title="Mine")
    make_post(title="Theirs", organizer_Email="other@example.com")
    login(ORGANIZER)

    response = client.get("/post", params={"email": ORGANIZER})
    assert _titles(response) == ["Mine"]


def test_update_replaces_business_fields_only(client: TestClient, login, make_post, store: MongoStore):
    post_id = make_post(title="Old", contact="keep me")
    login(ORGANIZER)

    response = client.put(
        f"/post/{post_id}",
        params={"email": ORGANIZER},
        json={"title": "New", "numberOfVolunteer": 9, "contact": "ignored"},
    )
    assert response.status_code == 200
    assert response.json() == {
        "acknowledged": True,
        "matchedCount": 1,
        "modifiedCount": 1,
        "upsertedId": None,
    }

    doc = store.posts.find_one()
    assert doc["title"] == "New"
    assert doc["numberOfVolunteer"] == 9
    # omitted business fields are overwritten, other fields untouched
    assert doc["category"] is None
    assert doc["organizer_Email"] is None
    assert doc["contact"] == "keep me"


def test_delete_post_keeps_requests(client: TestClient, login, make_post, store: MongoStore):
    post_id = make_post()
    store.requests.insert_one({"volunteer_email": "v@example.com", "postId": post_id})
    login(ORGANIZER)

    response = client.delete(f"/post/{post_id}", params={"email": ORGANIZER})
    assert response.json() == {"acknowledged": True, "deletedCount": 1}
    assert store.posts.count_documents({}) == 0
    assert store.requests.count_documents({"postId": post_id}) == 1

    response = client.delete(f"/post/{post_id}", params={"email": ORGANIZER})
    assert response.json() == {"acknowledged": True, "deletedCount": 0}


def test_database_failure_is_reported(client: TestClient, monkeypatch):
    def boom(store):
        raise ServerSelectionTimeoutError("no servers")

    monkeypatch.setattr(post_service, "list_preview", boom)
    response = client.get("/posts")
    assert response.status_code == 500
    assert response.json() == {"message": "database error"}


def test_create_stores_body_verbatim(client: TestClient, login):
    login(ORGANIZER)
    for capacity in ("4", "five"):
        post = {"title": "Tree Planting", "numberOfVolunteer": capacity, "organizer_Email": ORGANIZER}
        response = client.post("/post", params={"email": ORGANIZER}, json=post)
        assert response.status_code == 200

        post_id = response.json()["insertedId"]
        fetched = client.get(f"/post/{post_id}", params={"email": ORGANIZER}).json()
        assert fetched.pop("_id") == post_id
        assert fetched == post
