import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base
from services.game_service import GameService
from services.user_service import UserService


@pytest.fixture
def session_factory():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield sessionmaker(autocommit=False, autoflush=False, bind=engine)
    engine.dispose()


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def users(db) -> UserService:
    return UserService(db)


@pytest.fixture
def service(db) -> GameService:
    return GameService(db)


@pytest.fixture
def alice(users) -> str:
    return users.create_user()["id"]


@pytest.fixture
def bob(users) -> str:
    return users.create_user()["id"]


@pytest.fixture
def carol(users) -> str:
    return users.create_user()["id"]
