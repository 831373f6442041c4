"""SQLite key/value storage through SQLAlchemy."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path

from sqlalchemy import DateTime, String, Text, create_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from filesystem.stores.base_storage import BaseStorage


def utc_now() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Declarative base."""


class StorageRecord(Base):
    """One persisted key/value pair."""

    __tablename__ = "local_storage"

    key: Mapped[str] = mapped_column(String(128), primary_key=True)
    value: Mapped[str] = mapped_column(Text)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utc_now, onupdate=utc_now
    )


class SQLStore(BaseStorage):
    """Provides durable key/value persistence in a SQLite database file."""

    def __init__(self, db_path: Path) -> None:
        self.db_path = db_path
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.engine = create_engine(f"sqlite+pysqlite:///{self.db_path}", future=True)
        self._session_factory = sessionmaker(bind=self.engine, future=True)

    def create_all(self) -> None:
        """Create all schema tables if missing."""
        Base.metadata.create_all(self.engine)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """Context manager that commits on success and rolls back on error."""
        sess = self._session_factory()
        try:
            yield sess
            sess.commit()
        except Exception:
            sess.rollback()
            raise
        finally:
            sess.close()

    def get_item(self, key: str) -> str | None:
        with self.session() as sess:
            row = sess.get(StorageRecord, key)
            return row.value if row is not None else None

    def set_item(self, key: str, value: str) -> None:
        with self.session() as sess:
            row = sess.get(StorageRecord, key)
            if row is None:
                sess.add(StorageRecord(key=key, value=value))
            else:
                row.value = value

    def remove_item(self, key: str) -> None:
        with self.session() as sess:
            row = sess.get(StorageRecord, key)
            if row is not None:
                sess.delete(row)
