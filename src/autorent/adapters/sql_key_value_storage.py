"""SQL implementation of KeyValueStorage."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import select
from sqlalchemy.orm import Session

from autorent.infra.db.models.storage_entry import StorageEntryRow
from autorent.ports.key_value_storage import KeyValueStorage


class SqlKeyValueStorage(KeyValueStorage):
    """
    Key-value storage backed by the storage_entries table.

    Writes are flushed immediately so a later read in the same session sees
    them; commit/rollback belongs to the session owner (see get_session()).
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get(self, key: str) -> str | None:
        row = self._session.get(StorageEntryRow, key)
        return row.value if row else None

    def set(self, key: str, value: str) -> None:
        row = self._session.get(StorageEntryRow, key)
        if row is None:
            self._session.add(StorageEntryRow(key=key, value=value))
        else:
            row.value = value
        self._session.flush()

    def remove(self, key: str) -> None:
        row = self._session.get(StorageEntryRow, key)
        if row is not None:
            self._session.delete(row)
            self._session.flush()

    @contextmanager
    def locked(self, key: str) -> Iterator[None]:
        """
        Lock the key's row (SELECT ... FOR UPDATE) and reload it.

        The row lock lasts until the session owner commits or rolls back, so
        a second transaction on the same key waits and then reads the
        committed value. SQLite ignores FOR UPDATE.
        """
        stmt = (
            select(StorageEntryRow)
            .where(StorageEntryRow.key == key)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        self._session.scalars(stmt).first()
        yield
