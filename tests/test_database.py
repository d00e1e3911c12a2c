"""Tests for engine configuration."""

from database import BASE_DIR, build_engine_kwargs, resolve_database_url


def test_empty_url_falls_back_to_sqlite_file():
    assert resolve_database_url("  ") == f"sqlite:///{(BASE_DIR / 'ecommerce.db').as_posix()}"


def test_url_is_used_as_given():
    assert resolve_database_url(" postgresql://shop@db/shop ") == "postgresql://shop@db/shop"


def test_sqlite_lock_wait_is_bounded():
    kwargs = build_engine_kwargs("sqlite:///shop.db", connect_timeout=5)

    assert kwargs["connect_args"] == {"check_same_thread": False, "timeout": 5}


def test_server_connections_are_bounded():
    kwargs = build_engine_kwargs("postgresql://shop@db/shop", connect_timeout=7.5)

    assert kwargs["connect_args"] == {"connect_timeout": 7}
    assert kwargs["pool_timeout"] == 7.5
