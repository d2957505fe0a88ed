import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from bargainwala.db.models import Base
from bargainwala.db.seed import seed_session


@pytest.fixture
def empty_db_session():
    """In-memory SQLite DB with the schema but no rows."""
    engine = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)
    Session = sessionmaker(bind=engine)
    session = Session()
    yield session
    session.close()


@pytest.fixture
def db_session(empty_db_session):
    """In-memory SQLite DB with the seeded catalog, slots and delivery."""
    seed_session(empty_db_session)
    return empty_db_session
