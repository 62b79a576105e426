# app/modules/expenses/repository.py
from sqlalchemy.orm import Session
from sqlalchemy import and_, func
from typing import List, Optional
from datetime import datetime
from decimal import Decimal

from app.shared.database.models import Expense
from .schemas import ExpenseStatus

class ExpensesRepository:
    """Acceso a datos de gastos.

    Las escrituras hacen commit; las lecturas devuelven listas ordenadas por
    fecha descendente.
    """

    def __init__(self, db: Session):
        self.db = db

    def _ordered(self, query):
        return query.order_by(Expense.date.desc(), Expense.id.desc())

    def save(self, expense: Expense) -> Expense:
        """Insertar o actualizar un gasto"""
        self.db.add(expense)
        self.db.commit()
        self.db.refresh(expense)
        return expense

    def discard_changes(self) -> None:
        """Descartar cambios en memoria que no deben persistirse"""
        self.db.rollback()

    def find_by_id(self, expense_id: int) -> Optional[Expense]:
        return self.db.get(Expense, expense_id)

    def find_all(self) -> List[Expense]:
        return self._ordered(self.db.query(Expense)).all()

    def find_by_user_id(self, user_id: int) -> List[Expense]:
        return self._ordered(
            self.db.query(Expense).filter(Expense.user_id == user_id)
        ).all()

    def find_by_department_id(self, department_id: int) -> List[Expense]:
        return self._ordered(
            self.db.query(Expense).filter(Expense.department_id == department_id)
        ).all()

    def find_by_status(self, status: ExpenseStatus) -> List[Expense]:
        return self._ordered(
            self.db.query(Expense).filter(Expense.status == status)
        ).all()

    def find_by_department_id_and_status(self, department_id: int, status: ExpenseStatus) -> List[Expense]:
        return self._ordered(
            self.db.query(Expense).filter(
                and_(
                    Expense.department_id == department_id,
                    Expense.status == status
                )
            )
        ).all()

    def find_by_date_between(self, start: datetime, end: datetime) -> List[Expense]:
        """Gastos con fecha en [start, end], ambos inclusive"""
        return self._ordered(
            self.db.query(Expense).filter(Expense.date.between(start, end))
        ).all()

    def count_by_status(self, status: ExpenseStatus) -> int:
        return self.db.query(func.count(Expense.id)).filter(
            Expense.status == status
        ).scalar() or 0

    def count_by_status_and_date_between(self, status: ExpenseStatus, start: datetime, end: datetime) -> int:
        return self.db.query(func.count(Expense.id)).filter(
            and_(
                Expense.status == status,
                Expense.date.between(start, end)
            )
        ).scalar() or 0

    def sum_amount_by_date_between(self, start: datetime, end: datetime) -> Decimal:
        """Suma de montos en el rango; Decimal('0') si no hay gastos"""
        total = self.db.query(
            func.coalesce(func.sum(Expense.amount), 0)
        ).filter(
            Expense.date.between(start, end)
        ).scalar()
        return Decimal(str(total or 0)).quantize(Decimal("0.01"))

    def exists_by_id(self, expense_id: int) -> bool:
        return bool(self.db.query(
            self.db.query(Expense.id).filter(Expense.id == expense_id).exists()
        ).scalar())

    def delete_by_id(self, expense_id: int) -> None:
        self.db.query(Expense).filter(Expense.id == expense_id).delete(synchronize_session="fetch")
        self.db.commit()
