"""
Database connection and session management
Supports SQLite (default) and PostgreSQL
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from typing import Generator
from profile_api.config import settings

# Create database engine
connect_args = {}
if settings.DATABASE_URL.startswith("postgresql"):
    connect_args = {
        "connect_timeout": 10,
        "options": "-c timezone=utc"
    }
elif settings.DATABASE_URL.startswith("sqlite"):
    # Sync endpoints run in the threadpool, sessions cross threads
    connect_args = {"check_same_thread": False}

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,  # Verify connections before using
    connect_args=connect_args
)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def get_db() -> Generator[Session, None, None]:
    """
    One session per request, closed once the response is sent
    Endpoints take it as db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Create the users and images tables if missing"""
    # Registers both models on Base.metadata
    from profile_api.models import user, image
    Base.metadata.create_all(bind=engine)


def close_db():
    """Release all pooled connections"""
    engine.dispose()
