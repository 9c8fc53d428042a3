# fitclub_server/database.py

from pathlib import Path
from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import sessionmaker
from fitclub_server.models import Base
from fitclub_server.core.seed import seed_all


class Database:
    """
    Persistence handle owning the engine and session factory.
    Built once per application and stored on `app.state.db`.
    """

    def __init__(self, url: str):
        connect_args = {}
        parsed = make_url(url)
        if parsed.get_backend_name() == "sqlite":
            connect_args["check_same_thread"] = False
            if parsed.database and parsed.database != ":memory:":
                Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)

        self.engine = create_engine(url, connect_args=connect_args)
        self.SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine
        )

    def create_all(self):
        Base.metadata.create_all(bind=self.engine)

    def dispose(self):
        self.engine.dispose()


def init_db(db: Database, settings):
    db.create_all()
    session = db.SessionLocal()
    try:
        seed_all(session, settings)
    finally:
        session.close()


def get_db(request: Request):
    session = request.app.state.db.SessionLocal()
    try:
        yield session
    finally:
        session.close()
