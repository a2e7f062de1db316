# seed.py
from app.db import MongoStore

posts = [
    {
        "title": "Beach Cleanup Crew",
        "category": "Environment",
        "location": "Cox's Bazar",
        "numberOfVolunteer": 12,
        "photo_url": "https://i.ibb.co/beach-cleanup.jpg",
        "description": "Help us clear plastic from the shoreline.",
        "deadline": "2026-11-02T09:00:00.000Z",
        "organizer_Email": "alice@example.com",
        "organizer_Name": "Alice",
    },
    {
        "title": "Food Bank Packing",
        "category": "Social Service",
        "location": "Dhaka",
        "numberOfVolunteer": 8,
        "photo_url": "https://i.ibb.co/food-bank.jpg",
        "description": "Pack weekly food parcels for families.",
        "deadline": "2026-11-10T10:00:00.000Z",
        "organizer_Email": "bob@example.com",
        "organizer_Name": "Bob",
    },
    {
        "title": "Reading Buddies",
        "category": "Education",
        "location": "Chattogram",
        "numberOfVolunteer": 5,
        "photo_url": "https://i.ibb.co/reading.jpg",
        "description": "Read with primary school children after class.",
        "deadline": "2026-12-01T15:00:00.000Z",
        "organizer_Email": "alice@example.com",
        "organizer_Name": "Alice",
    },
    {
        "title": "Blood Donation Camp",
        "category": "Healthcare",
        "location": "Sylhet",
        "numberOfVolunteer": 20,
        "photo_url": "https://i.ibb.co/blood-camp.jpg",
        "description": "Register donors and run the refreshment desk.",
        "deadline": "2026-11-20T08:30:00.000Z",
        "organizer_Email": "carol@example.com",
        "organizer_Name": "Carol",
    },
]

store = MongoStore().connect()

# Optional: clear old data
store.posts.delete_many({})
print("Cleared existing posts collection")

store.posts.insert_many(posts)
store.close()

print(f"Inserted {len(posts)} posts into {store.db_name}")
