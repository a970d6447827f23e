import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, create_db_engine, get_db, init_db
from app.main import app
from app.models.category import Category, Hashtag
from app.models.reservation import Reservation, ReservationStatus
from app.models.user import User, UserRole
from app.security.auth import create_access_token

# In-memory SQLite shared by every session through StaticPool.
test_engine = create_db_engine("sqlite://", poolclass=StaticPool)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(name="session")
def session_fixture():
    """Fresh schema per test."""
    init_db(test_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(test_engine)


@pytest.fixture(name="client")
def client_fixture(session: Session):
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(session: Session):
    """Insert a user directly (password hash is a placeholder)."""
    def _make(nickname: str, role: UserRole = UserRole.USER, email: str = None) -> User:
        user = User(
            nickname=nickname,
            email=email or f"{nickname}@example.com",
            password_hash="not-a-real-hash",
            role=role,
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make


@pytest.fixture
def make_reservation(session: Session):
    def _make(mentor: User, mentee: User, status=ReservationStatus.REQUEST,
              category: Category = None, hashtags=()) -> Reservation:
        reservation = Reservation(
            mentor_id=mentor.id,
            mentee_id=mentee.id,
            status=status,
            category_id=category.id if category else None,
            request_message="please",
        )
        reservation.hashtags = list(hashtags)
        session.add(reservation)
        session.commit()
        session.refresh(reservation)
        return reservation

    return _make


@pytest.fixture
def make_category(session: Session):
    def _make(name: str) -> Category:
        category = Category(name=name)
        session.add(category)
        session.commit()
        session.refresh(category)
        return category

    return _make


@pytest.fixture
def make_hashtag(session: Session):
    def _make(name: str) -> Hashtag:
        hashtag = Hashtag(name=name)
        session.add(hashtag)
        session.commit()
        session.refresh(hashtag)
        return hashtag

    return _make


def auth_header(user: User) -> dict:
    token = create_access_token(user.id, user.role.value)
    return {"Authorization": f"Bearer {token}"}
