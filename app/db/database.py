# /app/db/database.py

import os
from dotenv import load_dotenv
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from .base_class import Base

load_dotenv()

# Get the database URL from the environment.
# The second argument is a default value for local development.
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./content_studio.db")

# The 'check_same_thread' argument is only needed for SQLite.
engine_args = {"connect_args": {"check_same_thread": False}} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, **engine_args)


def _set_sqlite_pragma(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def enable_sqlite_foreign_keys(target_engine) -> None:
    """SQLite ignores FOREIGN KEY clauses (and ON DELETE CASCADE) unless every connection opts in."""
    if target_engine.dialect.name == "sqlite":
        event.listen(target_engine, "connect", _set_sqlite_pragma)


enable_sqlite_foreign_keys(engine)

# Objects keep their loaded values after commit, so a committed row never
# needs a follow-up SELECT before it can be returned.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


def bootstrap_schema(bind=None) -> bool:
    """
    Creates the generations, saved_results and training_examples tables if they
    do not exist yet. All three CREATE statements run inside one transaction.

    Returns False (after logging) instead of raising, so the API can still start
    and serve degraded reads when the database is unavailable.
    """
    # Importing the registry makes sure every model is attached to Base.metadata.
    from . import base  # noqa: F401

    target = bind if bind is not None else engine
    try:
        with target.begin() as connection:
            Base.metadata.create_all(bind=connection)
        return True
    except Exception as e:
        print(f"ERROR ensuring database schema: {e}")
        return False


# Dependency to get a DB session. This will be used in our API routers.
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
