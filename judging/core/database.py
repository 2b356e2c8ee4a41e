from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from judging.core.config import settings


def create_db_engine(database_url: str):
    """Build the engine for `database_url`.

    SQLite gets foreign key enforcement switched on so every backend applies
    the same referential rules; an in-memory SQLite URL shares one connection
    across threads.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(database_url, **kwargs)

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    return create_engine(
        database_url,
        pool_pre_ping=True,   # tests connections before using them
        pool_recycle=1800,    # recycle every 30 min to avoid stale connections
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=30,
    )


engine = create_db_engine(settings.DATABASE_URL)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()

# Dependency to get DB session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

# Function to initialize the database
def init_db(bind=None):
    # Import all models here
    from judging.students.models.student_model import Student
    from judging.judges.models.judge_model import Judge
    from judging.events.models.event_model import Event
    from judging.assignments.models.judge_event_model import JudgeEvent
    from judging.projects.models.project_model import Project
    from judging.reviews.models.review_model import Review

    # Use context manager to ensure connection is released
    with (bind or engine).begin() as conn:
        Base.metadata.create_all(bind=conn)
