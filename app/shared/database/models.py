# app/shared/database/models.py
from sqlalchemy import (
    Column, Integer, String, DateTime, Text, Numeric, ForeignKey,
    CheckConstraint, Enum, Index, func
)

from app.config.database import Base
from app.shared.schemas.expense_types import ExpenseCategory, ExpenseStatus

# =====================================================
# MIXIN PARA TIMESTAMPS
# =====================================================
class TimestampMixin:
    """Mixin que agrega campos created_at y updated_at"""
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    updated_at = Column(DateTime, nullable=False, server_default=func.current_timestamp(), onupdate=func.current_timestamp())


# =====================================================
# REFERENCIAS (departamentos y usuarios)
# =====================================================

class Department(Base, TimestampMixin):
    """Modelo de Departamento"""
    __tablename__ = "departments"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, unique=True)


class User(Base, TimestampMixin):
    """Modelo de Usuario"""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, unique=True)
    full_name = Column(String(255), nullable=False)


# =====================================================
# GASTOS
# =====================================================

class Expense(Base, TimestampMixin):
    """Modelo de Gasto

    Departamento y usuario se guardan solo como identificadores; los nombres
    se resuelven con ReferenceRepository cuando se arma la respuesta.
    """
    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True, index=True)
    amount = Column(Numeric(12, 2), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(Enum(ExpenseCategory, name="expense_category", native_enum=False, length=20), nullable=False)
    date = Column(DateTime, nullable=False, index=True)
    department_id = Column(Integer, ForeignKey("departments.id"), nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    status = Column(
        Enum(ExpenseStatus, name="expense_status", native_enum=False, length=20),
        nullable=False,
        default=ExpenseStatus.PENDING
    )

    __table_args__ = (
        CheckConstraint("amount > 0", name="expense_amount_gt_zero"),
        Index("ix_expenses_department_status", "department_id", "status"),
        Index("ix_expenses_status_date", "status", "date"),
    )
