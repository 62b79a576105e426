"""Shared test fixtures and configuration."""

from __future__ import annotations

import os
from datetime import datetime
from decimal import Decimal
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from app.config.database import Base, get_db
from app.main import app
from app.shared.database.models import Department, Expense, User
from app.shared.schemas.expense_types import ExpenseCategory, ExpenseStatus


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Provide a clean in-memory database session for each test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = factory()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """TestClient whose requests share the test session."""
    app.dependency_overrides[get_db] = lambda: db_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def references(db_session: Session) -> dict:
    """One department and one user, ids 1."""
    department = Department(id=1, name="Finanzas")
    user = User(id=1, email="ana@empresa.com", full_name="Ana Contadora")
    db_session.add_all([department, user])
    db_session.commit()
    return {"department_id": department.id, "user_id": user.id}


@pytest.fixture
def make_expense(db_session: Session):
    """Insert an expense directly, bypassing the service."""

    def _make(
        amount: str = "50.00",
        status: ExpenseStatus = ExpenseStatus.PENDING,
        date: datetime | None = None,
        department_id: int = 1,
        user_id: int = 1,
        category: ExpenseCategory = ExpenseCategory.MEALS,
        description: str = "Almuerzo con cliente",
    ) -> Expense:
        expense = Expense(
            amount=Decimal(amount),
            description=description,
            category=category,
            date=date or datetime.now().replace(microsecond=0),
            department_id=department_id,
            user_id=user_id,
            status=status,
        )
        db_session.add(expense)
        db_session.commit()
        db_session.refresh(expense)
        return expense

    return _make
