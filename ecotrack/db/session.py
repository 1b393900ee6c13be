# ecotrack/db/session.py
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from ecotrack.core.config import settings

# The engine owns the connection pool for the configured database.
engine = create_engine(settings.DATABASE_URL, pool_pre_ping=True)

# One session per request; see get_db below.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        # Always release the connection, even if the endpoint raised.
        db.close()
