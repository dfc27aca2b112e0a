from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from app.core.config import DATABASE_URL, DB_ECHO, DB_POOL_SIZE, DB_MAX_OVERFLOW, DB_POOL_RECYCLE, DB_ISOLATION_LEVEL


def build_engine(url: str = DATABASE_URL):
    # SQLite does not accept the server pool/isolation options
    if url.startswith("sqlite"):
        return create_engine(url, echo=DB_ECHO, connect_args={"check_same_thread": False})

    return create_engine(
        url,
        echo=DB_ECHO,
        pool_size=DB_POOL_SIZE,
        max_overflow=DB_MAX_OVERFLOW,
        pool_recycle=DB_POOL_RECYCLE,
        pool_pre_ping=True,
        isolation_level=DB_ISOLATION_LEVEL
    )


engine = build_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

# Dependency to inject a DB session per request
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
