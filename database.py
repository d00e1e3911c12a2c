import logging
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from config import settings

logger = logging.getLogger(__name__)

BASE_DIR = Path(__file__).resolve().parent


def resolve_database_url(url: str) -> str:
    url = url.strip()
    if not url:
        default_sqlite_path = BASE_DIR / "ecommerce.db"
        logger.warning("DATABASE_URL not set. Falling back to SQLite at %s", default_sqlite_path)
        return f"sqlite:///{default_sqlite_path.as_posix()}"
    return url


def build_engine_kwargs(url: str, connect_timeout: float) -> dict:
    """
    Engine options for the given URL. ``connect_timeout`` bounds how long a
    connection attempt (or, on SQLite, a locked database) may block.
    """
    engine_kwargs = {
        "echo": False,
        "future": True,
        "pool_pre_ping": True,
    }
    if url.startswith("sqlite"):
        engine_kwargs["connect_args"] = {"check_same_thread": False, "timeout": connect_timeout}
    else:
        engine_kwargs["connect_args"] = {"connect_timeout": int(connect_timeout)}
        engine_kwargs["pool_timeout"] = connect_timeout
    return engine_kwargs


DATABASE_URL = resolve_database_url(settings.DATABASE_URL)

engine = create_engine(DATABASE_URL, **build_engine_kwargs(DATABASE_URL, settings.DB_CONNECT_TIMEOUT_SECONDS))

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)

Base = declarative_base()

logger.info("Database configured: %s", engine.url.render_as_string(hide_password=True))
