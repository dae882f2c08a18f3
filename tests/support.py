"""Shared fixtures: in-memory SQLite database and settings for tests."""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.config import Settings
from app.models import Base

TEST_SECRET = "test-secret-key-that-is-at-least-32-bytes"


def make_settings(**overrides: object) -> Settings:
    """Settings with a known secret and a cheap bcrypt cost."""
    values: dict[str, object] = {
        "DATABASE_URL": "sqlite://",
        "JWT_SECRET": TEST_SECRET,
        "JWT_ALGORITHM": "HS256",
        "JWT_EXPIRE_MINUTES": 120,
        "BCRYPT_ROUNDS": 4,
    }
    values.update(overrides)
    return Settings(**values)


def make_engine() -> Engine:
    """
    One shared in-memory SQLite connection with the full schema.

    StaticPool keeps the same connection for every session, including the ones
    TestClient opens from its worker threads.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    return engine


def session_factory(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db(factory: sessionmaker[Session]):
    """Build a get_db replacement bound to the test engine."""

    def _get_db() -> Generator[Session, None, None]:
        db = factory()
        try:
            yield db
        finally:
            db.close()

    return _get_db
