from __future__ import annotations

import uuid
from typing import Any, Protocol

from sqlalchemy import insert
from sqlalchemy.orm import Session, sessionmaker

from docdrop.core.lazy import Lazy
from docdrop.db.session import get_sessionmaker
from docdrop.models import Base


class UnknownCollection(LookupError):
    pass


class DocumentStore(Protocol):
    def insert_one(self, collection: str, record: dict[str, Any]) -> str: ...


class SqlDocumentStore:
    """Document store over SQLAlchemy: a collection is a table on ``Base.metadata``."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def insert_one(self, collection: str, record: dict[str, Any]) -> str:
        table = Base.metadata.tables.get(collection)
        if table is None:
            raise UnknownCollection(f"Unknown collection {collection!r}")

        values = dict(record)
        values.setdefault("id", str(uuid.uuid4()))
        with self._session_factory() as db:
            db.execute(insert(table).values(**values))
            db.commit()
        return values["id"]


_document_store: Lazy[DocumentStore] = Lazy(lambda: SqlDocumentStore(get_sessionmaker()))


def get_document_store() -> DocumentStore:
    return _document_store.get()
