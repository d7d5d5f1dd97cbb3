from stockwatch.database.base import Base
from stockwatch.database.engine import build_engine, engine
from stockwatch.database.session import SessionLocal, get_db, session_scope

__all__ = ["Base", "SessionLocal", "build_engine", "engine", "get_db", "session_scope"]
