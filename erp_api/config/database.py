from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from .settings import settings

# Base class for models
Base = declarative_base()

# Execution option marking a transaction that is going to write
WRITE_INTENT = "erp_write_intent"


def build_engine(database_url: str, echo: bool = False) -> Engine:
    """Create the engine; SQLite gets WAL, foreign keys and explicit BEGIN handling"""
    if not database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            pool_pre_ping=True,
            pool_recycle=300,
            echo=echo
        )

    engine = create_engine(
        database_url,
        connect_args={
            "check_same_thread": False,
            "timeout": settings.sqlite_busy_timeout
        },
        echo=echo
    )

    @event.listens_for(engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        # pysqlite's implicit BEGIN is disabled so the "begin" hook owns it
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    @event.listens_for(engine, "begin")
    def _on_begin(conn):
        # writers take the database write lock up front and queue on the busy timeout
        if conn.get_execution_options().get(WRITE_INTENT):
            conn.exec_driver_sql("BEGIN IMMEDIATE")
        else:
            conn.exec_driver_sql("BEGIN")

    return engine


def begin_write(db: Session) -> None:
    """
    Open the session's transaction as a writer.

    Must run before the first query of the unit of work; on an already
    started transaction it does nothing.
    """
    if not db.in_transaction():
        db.connection(execution_options={WRITE_INTENT: True})


# Create engine
engine = build_engine(settings.database_url, echo=settings.debug)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Database dependency
def get_db():
    """Database dependency for FastAPI"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
