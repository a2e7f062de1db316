# dedupe_requests.py
# Run once before starting the API on a database that already holds the same
# (volunteer_email, postId) pair more than once.
from app.db import MongoStore

store = MongoStore().connect(with_indexes=False)
removed = store.drop_duplicate_requests()
store.ensure_indexes()
store.close()

print(f"Removed {removed} duplicate requests from {store.db_name}")
