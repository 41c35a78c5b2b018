import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool

import models  # noqa: F401
from database import Base, get_db
from main import app


def _override_get_db(db_path):
    # NullPool: TestClient may run each request on a fresh event loop
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    session_factory = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def _get_db():
        async with session_factory() as session:
            yield session

    return _get_db


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "inventory.db"
    sync_engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()
    return path


@pytest.fixture
def client(db_path):
    app.dependency_overrides[get_db] = _override_get_db(db_path)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_client(tmp_path):
    # database file without the products table
    app.dependency_overrides[get_db] = _override_get_db(tmp_path / "empty.db")
    yield TestClient(app)
    app.dependency_overrides.clear()
