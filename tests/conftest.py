import os

# konfiguracja przed importem aplikacji
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("CELERY_TASK_ALWAYS_EAGER", "true")
os.environ.setdefault("CELERY_BROKER_URL", "memory://")
os.environ.setdefault("CELERY_RESULT_BACKEND", "cache+memory://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "test-secret")

import threading
from decimal import Decimal
from collections import defaultdict
from contextlib import contextmanager
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from storefront.api.deps import get_lock_service
from storefront.data.database import Base, get_db
from storefront.data.models import CategoryModel, ProductModel, UserModel
from storefront.main import create_app
from storefront.services.password_service import hash_password

TEST_SECRET = os.environ["JWT_SECRET"]


class InMemoryLockService:
    """Lock per user w pamieci procesu, zamiast Redisa."""

    def __init__(self):
        self._locks = defaultdict(threading.Lock)
        self.acquired = []

    @contextmanager
    def user_lock(self, user_id: int):
        with self._locks[user_id]:
            self.acquired.append(user_id)
            yield


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def lock_service():
    return InMemoryLockService()


@pytest.fixture
def notification_service():
    return MagicMock()


@pytest.fixture
def app(session_factory, lock_service):
    app = create_app(init_database=False)

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_lock_service] = lambda: lock_service
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def user(db_session):
    user = UserModel(name="Alice", email="alice@example.com", password=hash_password("secret"))
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def category(db_session):
    category = CategoryModel(name="Electronics", description="Gadgets")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def products(db_session, category):
    items = [
        ProductModel(title="Keyboard", price=Decimal("199.99"), description="Mechanical", category_id=category.id),
        ProductModel(title="Mouse", price=Decimal("49.50"), description="Wireless", category_id=category.id),
    ]
    db_session.add_all(items)
    db_session.commit()
    for p in items:
        db_session.refresh(p)
    return items


class ApiUser:
    """Rejestracja + logowanie przez API, zwraca naglowki Bearer."""

    def __init__(self, client: TestClient):
        self.client = client

    def register(self, name="Bob", email="bob@example.com", password="pa55word"):
        return self.client.post(
            "/api/user/register",
            json={"name": name, "email": email, "password": password},
        )

    def login(self, email="bob@example.com", password="pa55word"):
        return self.client.post("/api/user/login", json={"email": email, "password": password})

    def headers(self, name="Bob", email="bob@example.com", password="pa55word"):
        self.register(name=name, email=email, password=password)
        token = self.login(email=email, password=password).json()["token"]
        return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def api_user(client):
    return ApiUser(client)
