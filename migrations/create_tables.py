import sys
import os

# Add the project root to sys.path
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.core.database import engine, Base

# Entities must be imported so SQLAlchemy registers their tables
from app.domain.entities.UserEntity import UserEntity


def create_tables():
    Base.metadata.create_all(bind=engine)
    print(f"Tables created: {', '.join(Base.metadata.tables)}")


if __name__ == "__main__":
    create_tables()
