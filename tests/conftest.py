"""Shared fixtures: file-backed SQLite per test + FastAPI test client.

Invariants:
    - Every test gets a fresh database file under tmp_path
    - get_db is overridden so requests never touch the configured database
    - Seed helpers open, commit and close their own sessions, so what they
      return is already visible to any other session
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("SEED_DEMO_DATA", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from erp_api.config.database import Base, build_engine, get_db
from erp_api.core.auth.schemas import Identity, UserRole
from erp_api.core.auth.security import hash_password, identity_store
from erp_api.main import app
from erp_api.shared.database.models import (
    Client, FinancialEntry, Product, Sale, SaleItem, User
)


class Seeder:
    """Creates records and reads back state through short-lived sessions"""

    def __init__(self, session_factory):
        self.session_factory = session_factory

    def _add(self, record) -> int:
        session = self.session_factory()
        try:
            session.add(record)
            session.commit()
            return record.id
        finally:
            session.close()

    def client(self, name="Acme", email=None, phone="555-0100", address="1 Main St") -> int:
        email = email or f"{name.lower().replace(' ', '.')}@example.com"
        return self._add(Client(name=name, email=email, phone=phone, address=address))

    def product(self, name="Widget", price="10.00", stock=10, description=None) -> int:
        return self._add(Product(
            name=name, description=description, price=Decimal(price), stock=stock
        ))

    def user(self, email="user@example.com", password="secret123", role="operator", name="Test User") -> int:
        return self._add(User(
            name=name, email=email, password_hash=hash_password(password), role=role
        ))

    def stock(self, product_id: int) -> int:
        session = self.session_factory()
        try:
            return session.get(Product, product_id).stock
        finally:
            session.close()

    def count(self, model) -> int:
        session = self.session_factory()
        try:
            return session.query(model).count()
        finally:
            session.close()

    def ledger(self):
        session = self.session_factory()
        try:
            return [
                (entry.kind, entry.amount, entry.sale_id)
                for entry in session.query(FinancialEntry).order_by(FinancialEntry.id)
            ]
        finally:
            session.close()

    def nothing_sold(self) -> bool:
        return (
            self.count(Sale) == 0
            and self.count(SaleItem) == 0
            and self.count(FinancialEntry) == 0
        )


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'erp.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def seed(session_factory):
    return Seeder(session_factory)


@pytest.fixture
def client(session_factory):
    """FastAPI test client with the DB dependency overridden."""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # no context manager: the lifespan would create and seed the configured database
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_headers(role: UserRole = UserRole.OPERATOR, user_id: int = 1) -> dict:
    token = identity_store.issue(Identity(user_id=user_id, role=role))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def operator_headers():
    return auth_headers(UserRole.OPERATOR)


@pytest.fixture
def admin_headers():
    return auth_headers(UserRole.ADMIN)
