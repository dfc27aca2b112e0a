import sys
import os

# Add the project root to sys.path so `app` can be imported
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from app.core.database import SessionLocal
from app.domain.entities.UserEntity import UserEntity

USERS_DATA = [
    {"name": "Alice", "email": "alice@example.com", "age": 30},
    {"name": "Bob", "email": "bob@example.com", "age": 25},
    {"name": "Charlie", "email": "charlie@example.com", "age": 15},
    {"name": "Dana", "email": "dana@example.com", "age": None},
]


def seed_users(db=None):
    own_session = db is None
    if own_session:
        db = SessionLocal()

    created = 0
    try:
        for user in USERS_DATA:
            existing_user = db.query(UserEntity).filter_by(email=user["email"]).first()
            if not existing_user:
                db.add(UserEntity(**user))
                created += 1
        db.commit()
    finally:
        if own_session:
            db.close()

    print(f"Seeding completed! ({created} new users)")
    return created


if __name__ == "__main__":
    seed_users()
