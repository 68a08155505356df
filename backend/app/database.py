from collections.abc import Generator, Iterator
from contextlib import contextmanager

from sqlalchemy import event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, create_engine, select

from app.config import settings


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite ignores foreign keys unless every connection opts in."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_pragma(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_engine(settings.database_url, echo=False)
enable_sqlite_foreign_keys(engine)


def init_db() -> None:
    import app.models  # noqa: F401  register all models with SQLModel metadata

    SQLModel.metadata.create_all(engine)


def seed_categories(session: Session, names: list[str]) -> None:
    from app.models.question import Category

    if session.exec(select(Category)).first():
        return
    for name in names:
        session.add(Category(name=name))
    session.commit()


def get_session() -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


@contextmanager
def committing(session: Session) -> Iterator[Session]:
    """Commit on success; roll back and re-raise on any store failure."""
    try:
        yield session
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        raise
