# app/modules/expenses/service.py
from typing import Dict, Any, List, Optional
from datetime import date, datetime, time
from decimal import Decimal
import logging
from sqlalchemy.orm import Session

from .repository import ExpensesRepository
from .schemas import ExpenseCreateRequest, ExpenseUpdateRequest, ExpenseStatus
from app.core.errors import ValidationError
from app.core.results import Outcome
from app.shared.database.models import Expense

logger = logging.getLogger(__name__)

# Límites de la columna Numeric(12, 2)
AMOUNT_QUANTUM = Decimal("0.01")
MAX_AMOUNT = Decimal("9999999999.99")


class ExpensesService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = ExpensesRepository(db)

    async def create_expense(self, expense_data: ExpenseCreateRequest) -> Outcome[Expense]:
        """Registrar un gasto nuevo; siempre queda PENDING"""
        expense = Expense(
            amount=expense_data.amount,
            description=expense_data.description,
            category=expense_data.category,
            date=expense_data.date,
            department_id=expense_data.department_id,
            user_id=expense_data.user_id,
        )

        try:
            self._validate_expense(expense)
        except ValidationError as e:
            logger.warning(f"Gasto rechazado: {e.message}")
            return Outcome.invalid(e)

        expense.status = ExpenseStatus.PENDING
        expense = self.repository.save(expense)
        logger.info(f"Gasto {expense.id} creado por usuario {expense.user_id} (monto {expense.amount})")
        return Outcome.ok(expense)

    async def get_expense_by_id(self, expense_id: int) -> Outcome[Expense]:
        expense = self.repository.find_by_id(expense_id)
        if expense is None:
            return Outcome.not_found(f"Gasto no encontrado con id: {expense_id}")
        return Outcome.ok(expense)

    async def get_all_expenses(self) -> List[Expense]:
        return self.repository.find_all()

    async def get_expenses_by_user_id(self, user_id: int) -> List[Expense]:
        return self.repository.find_by_user_id(user_id)

    async def get_expenses_by_department(self, department_id: int) -> List[Expense]:
        return self.repository.find_by_department_id(department_id)

    async def get_expenses_by_status(self, status: ExpenseStatus) -> List[Expense]:
        return self.repository.find_by_status(status)

    async def get_pending_expenses_by_department(self, department_id: int) -> List[Expense]:
        return self.repository.find_by_department_id_and_status(department_id, ExpenseStatus.PENDING)

    async def update_expense_status(self, expense_id: int, status: Optional[ExpenseStatus]) -> Outcome[Expense]:
        """Cambiar el estado de un gasto.

        No hay máquina de estados: cualquier estado puede pasar a cualquier
        otro, incluso re-aprobar un gasto rechazado.
        """
        outcome = await self.get_expense_by_id(expense_id)
        if not outcome.is_ok:
            return outcome
        if status is None:
            return Outcome.invalid(ValidationError("Status is required"))

        expense = outcome.value
        previous = expense.status
        expense.status = status
        expense = self.repository.save(expense)
        logger.info(f"Gasto {expense_id}: estado {previous.value} -> {status.value}")
        return Outcome.ok(expense)

    async def update_expense(self, expense_id: int, expense_details: ExpenseUpdateRequest) -> Outcome[Expense]:
        """Actualizar descripción, monto, categoría y/o fecha"""
        outcome = await self.get_expense_by_id(expense_id)
        if not outcome.is_ok:
            return outcome

        expense = outcome.value

        # Solo los campos enviados reemplazan a los actuales
        if expense_details.description is not None:
            expense.description = expense_details.description
        if expense_details.amount is not None:
            expense.amount = expense_details.amount
        if expense_details.category is not None:
            expense.category = expense_details.category
        if expense_details.date is not None:
            expense.date = expense_details.date

        try:
            self._validate_expense(expense)
        except ValidationError as e:
            self.repository.discard_changes()
            logger.warning(f"Actualización del gasto {expense_id} rechazada: {e.message}")
            return Outcome.invalid(e)

        expense = self.repository.save(expense)
        logger.info(f"Gasto {expense_id} actualizado")
        return Outcome.ok(expense)

    async def delete_expense(self, expense_id: int) -> Outcome[None]:
        if not self.repository.exists_by_id(expense_id):
            return Outcome.not_found(f"Gasto no encontrado con id: {expense_id}")

        self.repository.delete_by_id(expense_id)
        logger.info(f"Gasto {expense_id} eliminado")
        return Outcome.ok()

    async def get_accountant_statistics(self) -> Dict[str, Any]:
        """Pendientes totales, aprobados del mes y total gastado en el mes.

        El mes va desde el día 1 a las 00:00 hasta ahora; se recalcula en
        cada llamada.
        """
        now = datetime.now()
        start_of_month = datetime.combine(now.date().replace(day=1), time.min)

        return {
            "total_pending": self.repository.count_by_status(ExpenseStatus.PENDING),
            "total_approved": self.repository.count_by_status_and_date_between(
                ExpenseStatus.APPROVED,
                start_of_month,
                now
            ),
            "monthly_total": self.repository.sum_amount_by_date_between(start_of_month, now),
            "period_start": start_of_month,
            "period_end": now,
        }

    def _validate_expense(self, expense: Expense) -> None:
        """Reglas comunes a creación y actualización; gana el primer fallo"""
        if expense.amount is None or expense.amount <= 0:
            raise ValidationError("Amount must be greater than 0")
        if expense.amount > MAX_AMOUNT:
            raise ValidationError(f"Amount must not exceed {MAX_AMOUNT}")
        if expense.amount != expense.amount.quantize(AMOUNT_QUANTUM):
            raise ValidationError("Amount must have at most 2 decimal places")
        if expense.description is None or not expense.description.strip():
            raise ValidationError("Description is required")
        if expense.category is None:
            raise ValidationError("Category is required")
        if expense.date is None:
            expense.date = datetime.combine(date.today(), time.min)
        if expense.department_id is None:
            raise ValidationError("Department is required")
        if expense.user_id is None:
            raise ValidationError("User is required")
