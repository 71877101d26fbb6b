#database file:
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy import create_engine

from .core.settings import settings

DATABASE_URL = settings.DATABASE_URL

connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine=create_engine(DATABASE_URL,pool_pre_ping=True,connect_args=connect_args)
SessionFittrack=sessionmaker(autocommit=False,autoflush=False,bind=engine)
Base=declarative_base()


def get_db():
    db = SessionFittrack()
    try:
        yield db
    finally:
        db.close()
