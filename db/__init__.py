from .database import init_db, get_db, get_db_dependency, engine, SessionLocal
from .models import Base, Startup, Review, EciHistory

__all__ = [
    "init_db", "get_db", "get_db_dependency", "engine", "SessionLocal",
    "Base", "Startup", "Review", "EciHistory",
]
