# record_store.py

from __future__ import annotations

import logging
import sqlite3
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from portfolio_models import Profile, Resume, utcnow

logger = logging.getLogger("portfolio-store")

Record = TypeVar("Record", bound=BaseModel)

SCHEMAS: Dict[str, str] = {
    Profile.table: """
        CREATE TABLE IF NOT EXISTS profiles (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            profile_image_url TEXT NOT NULL,
            name TEXT,
            title TEXT,
            bio TEXT,
            created_at TEXT,
            updated_at TEXT
        )
    """,
    Resume.table: """
        CREATE TABLE IF NOT EXISTS resumes (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            data BLOB NOT NULL,
            content_type TEXT NOT NULL,
            upload_date TEXT
        )
    """,
}


class StoreError(Exception):
    """Connectivity, query or constraint failure inside a record store."""


def _columns(kind: Type[BaseModel]) -> List[str]:
    return [name for name in kind.model_fields if name != "id"]


def _to_row(record: BaseModel) -> Dict[str, Any]:
    row = record.model_dump(exclude={"id"})
    return {k: v.isoformat() if isinstance(v, datetime) else v for k, v in row.items()}


class RecordStore(ABC):
    """
    Single-document operations keyed by record kind (a model class carrying
    a `table` name). Missing records are returned as None, every other
    failure is raised as StoreError.
    """

    name = "store"

    def connect(self) -> None:
        pass

    @abstractmethod
    def find_one(self, kind: Type[Record]) -> Optional[Record]:
        ...

    @abstractmethod
    def count(self, kind: Type[BaseModel]) -> int:
        ...

    @abstractmethod
    def _insert(self, record: BaseModel) -> int:
        ...

    @abstractmethod
    def _update(self, record: BaseModel) -> None:
        ...

    def create(self, kind: Type[Record], fields: Dict[str, Any]) -> Record:
        try:
            record = kind(**fields)
        except ValidationError as exc:
            raise StoreError(f"{kind.table}: invalid record: {exc}") from exc

        if getattr(kind, "timestamps", False):
            now = utcnow()
            record.created_at = now
            record.updated_at = now

        record.id = self._insert(record)
        logger.info("created %s record id=%s", kind.table, record.id)
        return record

    def save(self, record: Record) -> Record:
        if record.id is None:
            raise StoreError(f"{record.table}: cannot save a record that was never created")
        if getattr(record, "timestamps", False):
            record.updated_at = utcnow()
        self._update(record)
        return record


class SQLiteRecordStore(RecordStore):
    """One table per kind; a connection is opened for every operation."""

    name = "sqlite"

    def __init__(self, db_path: Path):
        self.db_path = Path(db_path)

    @contextmanager
    def _get_conn(self) -> Iterator[sqlite3.Connection]:
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as exc:
            raise StoreError(f"cannot open {self.db_path}: {exc}") from exc
        conn.row_factory = sqlite3.Row
        try:
            with conn:
                yield conn
        except sqlite3.Error as exc:
            raise StoreError(str(exc)) from exc
        finally:
            conn.close()

    def connect(self) -> None:
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreError(f"cannot create {self.db_path.parent}: {exc}") from exc

        with self._get_conn() as conn:
            for ddl in SCHEMAS.values():
                conn.execute(ddl)
        logger.info("SQLite store ready at %s", self.db_path)

    def find_one(self, kind: Type[Record]) -> Optional[Record]:
        with self._get_conn() as conn:
            row = conn.execute(f"SELECT * FROM {kind.table} ORDER BY id LIMIT 1").fetchone()
        if row is None:
            return None
        try:
            return kind(**dict(row))
        except ValidationError as exc:
            raise StoreError(f"{kind.table}: stored row id={row['id']} is invalid: {exc}") from exc

    def count(self, kind: Type[BaseModel]) -> int:
        with self._get_conn() as conn:
            return conn.execute(f"SELECT COUNT(*) FROM {kind.table}").fetchone()[0]

    def _insert(self, record: BaseModel) -> int:
        cols = _columns(type(record))
        placeholders = ", ".join(f":{c}" for c in cols)
        with self._get_conn() as conn:
            cur = conn.execute(
                f"INSERT INTO {record.table} ({', '.join(cols)}) VALUES ({placeholders})",
                _to_row(record),
            )
            return cur.lastrowid

    def _update(self, record: BaseModel) -> None:
        cols = _columns(type(record))
        assignments = ", ".join(f"{c} = :{c}" for c in cols)
        params = _to_row(record)
        params["id"] = record.id
        with self._get_conn() as conn:
            cur = conn.execute(f"UPDATE {record.table} SET {assignments} WHERE id = :id", params)
            if cur.rowcount == 0:
                raise StoreError(f"{record.table}: record id={record.id} no longer exists")


class InMemoryRecordStore(RecordStore):
    """Dict-backed store. Callers always get copies, so edits need save()."""

    name = "memory"

    def __init__(self):
        self._records: Dict[str, List[BaseModel]] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def find_one(self, kind: Type[Record]) -> Optional[Record]:
        with self._lock:
            records = self._records.get(kind.table) or []
            return records[0].model_copy(deep=True) if records else None

    def count(self, kind: Type[BaseModel]) -> int:
        with self._lock:
            return len(self._records.get(kind.table, []))

    def _insert(self, record: BaseModel) -> int:
        with self._lock:
            record_id = self._next_id
            self._next_id += 1
            stored = record.model_copy(deep=True)
            stored.id = record_id
            self._records.setdefault(record.table, []).append(stored)
            return record_id

    def _update(self, record: BaseModel) -> None:
        with self._lock:
            records = self._records.get(record.table, [])
            for i, existing in enumerate(records):
                if existing.id == record.id:
                    records[i] = record.model_copy(deep=True)
                    return
        raise StoreError(f"{record.table}: record id={record.id} no longer exists")
