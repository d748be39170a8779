from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from docdrop.core.config import Settings, get_settings
from docdrop.core.lazy import Lazy


def build_database_url(settings: Settings) -> URL:
    return make_url(settings.database_url).set(database=settings.database_name)


def _create_engine() -> Engine:
    url = build_database_url(get_settings())
    kwargs: dict = {"pool_pre_ping": True}
    if url.get_backend_name() == "sqlite":
        kwargs["connect_args"] = {"check_same_thread": False}
    return create_engine(url, **kwargs)


_engine: Lazy[Engine] = Lazy(_create_engine)
_sessionmaker: Lazy[sessionmaker[Session]] = Lazy(
    lambda: sessionmaker(bind=get_engine(), autocommit=False, autoflush=False, expire_on_commit=False)
)


def get_engine() -> Engine:
    return _engine.get()


def get_sessionmaker() -> sessionmaker[Session]:
    return _sessionmaker.get()


def dispose_engine() -> None:
    """Close pooled connections; the engine reconnects on next use."""
    if _engine.initialized:
        _engine.get().dispose()
