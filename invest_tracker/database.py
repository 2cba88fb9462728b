from sqlite3 import Connection as SQLite3Connection

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, Session, create_engine

from invest_tracker.core.config import DATABASE_URL, SQL_ECHO

connect_args = {}
if DATABASE_URL.startswith("sqlite"):
    connect_args = {"check_same_thread": False}

engine = create_engine(DATABASE_URL, echo=SQL_ECHO, connect_args=connect_args)


@event.listens_for(Engine, "connect")
def enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite leaves foreign keys off on every new connection
    if isinstance(dbapi_connection, SQLite3Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def import_models():
    # registers every table (and the beneficiary trigger) on SQLModel.metadata
    from invest_tracker.models import asset, beneficiary, dashboard, holding, portfolio, query, transaction, user  # noqa: F401


def create_db_and_tables():
    import_models()
    SQLModel.metadata.create_all(engine)


def get_session():
    with Session(engine) as session:
        yield session
