"""Shared pytest fixtures for all tests."""

import os

# Must be set before the inventory package builds its engine.
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient

from inventory.core.database import Base, SessionLocal, engine, get_db
from inventory.crud.category_crud import CategoryRepository
from inventory.main import app
from inventory.models.category_model import Category
from inventory.services.category_service import CategoryService


@pytest.fixture
def db_session():
    """Session bound to a fresh in-memory schema.

    Yields:
        Session: SQLAlchemy session; tables are dropped afterwards.
    """
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    yield db
    db.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def repository(db_session):
    return CategoryRepository(db_session)


@pytest.fixture
def service(repository):
    return CategoryService(repository)


@pytest.fixture
def tools(db_session):
    """A stored category: Tools / Hand tools."""
    category = Category(name="Tools", description="Hand tools")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def client(db_session):
    """TestClient whose requests share the test session."""
    app.dependency_overrides[get_db] = lambda: db_session
    yield TestClient(app)
    app.dependency_overrides.clear()
