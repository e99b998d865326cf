"""Shared builders for store-backed tests."""

from sqlalchemy.orm import Session, sessionmaker

from app.core.database import make_engine
from app.models import Base
from app.services.roles import ensure_roles


def make_session(seed_roles: bool = True) -> Session:
    """Fresh in-memory store with the schema and, by default, the static roles."""
    engine = make_engine("sqlite://")
    Base.metadata.create_all(engine)
    db = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    if seed_roles:
        ensure_roles(db)
    return db
