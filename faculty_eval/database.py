from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from faculty_eval.config import DATABASE_URL
from faculty_eval.models.base_model import Base

engine = create_engine(DATABASE_URL, pool_pre_ping=True)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

__all__ = ["Base", "engine", "SessionLocal"]
