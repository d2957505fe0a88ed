"""Engine + session factory for the catalog and delivery database.

The bargain cart itself never touches the database; only the recommended
products, delivery slots, the booked delivery and item requests live here.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from bargainwala.db.models import Base

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///data/bargainwala.db")


def _sqlite_path(url: str) -> Path | None:
    """File path behind a sqlite URL, or None for in-memory and other backends."""
    if not url.startswith("sqlite:///"):
        return None
    db_path = url.removeprefix("sqlite:///")
    if not db_path or db_path == ":memory:":
        return None
    return Path(db_path)


def get_engine(url: str = DATABASE_URL):
    db_path = _sqlite_path(url)
    if db_path is not None:
        db_path.parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, echo=False)


def init_db(engine=None):
    """Create the catalog, slot, delivery and request tables."""
    engine = engine or get_engine()
    Base.metadata.create_all(engine)
    return engine


engine = get_engine()
SessionLocal = sessionmaker(bind=engine)
