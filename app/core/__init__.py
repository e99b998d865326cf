"""Core app configuration and database."""

from app.core.config import get_settings, settings
from app.core.database import SessionLocal, make_engine

__all__ = ["get_settings", "settings", "make_engine", "SessionLocal"]
