# app/modules/expenses/router.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import List

from app.config.database import get_db
from app.shared.database.models import Expense
from app.shared.database.reference import ReferenceRepository
from app.shared.schemas.common import ErrorResponse, HealthResponse
from .service import ExpensesService
from .schemas import (
    ExpenseCreateRequest, ExpenseUpdateRequest, ExpenseResponse, ExpenseStatus,
    AccountantStatisticsResponse, ExpenseDeletedResponse
)

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Gasto inexistente"}}
INVALID = {400: {"model": ErrorResponse, "description": "Datos del gasto inválidos"}}


def _to_responses(db: Session, expenses: List[Expense]) -> List[ExpenseResponse]:
    """Serializar gastos resolviendo nombres de departamento y usuario en lote"""
    references = ReferenceRepository(db)
    departments = references.department_names(e.department_id for e in expenses)
    users = references.user_names(e.user_id for e in expenses)

    responses = []
    for expense in expenses:
        response = ExpenseResponse.model_validate(expense)
        response.department_name = departments.get(expense.department_id)
        response.user_name = users.get(expense.user_id)
        responses.append(response)
    return responses


def _to_response(db: Session, expense: Expense) -> ExpenseResponse:
    return _to_responses(db, [expense])[0]


@router.post("", response_model=ExpenseResponse, responses=INVALID)
async def create_expense(
    expense_data: ExpenseCreateRequest,
    db: Session = Depends(get_db)
):
    """
    Registrar un gasto

    - El estado enviado se ignora: todo gasto nuevo queda **PENDING**
    - Si no se envía fecha se usa el inicio del día actual
    """
    service = ExpensesService(db)
    outcome = await service.create_expense(expense_data)
    return _to_response(db, outcome.unwrap())


@router.get("", response_model=List[ExpenseResponse])
async def get_all_expenses(db: Session = Depends(get_db)):
    """Listar todos los gastos"""
    service = ExpensesService(db)
    return _to_responses(db, await service.get_all_expenses())


@router.get("/statistics", response_model=AccountantStatisticsResponse)
async def get_accountant_statistics(db: Session = Depends(get_db)):
    """
    Estadísticas para contabilidad

    **Incluye:**
    - Total de gastos pendientes
    - Gastos aprobados en el mes en curso
    - Monto total gastado en el mes en curso
    """
    service = ExpensesService(db)
    stats = await service.get_accountant_statistics()
    return AccountantStatisticsResponse(
        success=True,
        message="Estadísticas del mes en curso",
        **stats
    )


@router.get("/health", response_model=HealthResponse)
async def expenses_health():
    """Health check del módulo de gastos"""
    return HealthResponse(
        service="expenses",
        status="healthy",
        version="1.0.0",
        features=[
            "Registro de gastos",
            "Aprobación y rechazo",
            "Consultas por usuario, departamento y estado",
            "Estadísticas mensuales"
        ]
    )


@router.get("/status/{status}", response_model=List[ExpenseResponse])
async def get_expenses_by_status(
    status: ExpenseStatus,
    db: Session = Depends(get_db)
):
    """Listar gastos en un estado"""
    service = ExpensesService(db)
    return _to_responses(db, await service.get_expenses_by_status(status))


@router.get("/user/{user_id}", response_model=List[ExpenseResponse])
async def get_user_expenses(
    user_id: int,
    db: Session = Depends(get_db)
):
    """Listar gastos de un usuario"""
    service = ExpensesService(db)
    return _to_responses(db, await service.get_expenses_by_user_id(user_id))


@router.get("/department/{department_id}", response_model=List[ExpenseResponse])
async def get_department_expenses(
    department_id: int,
    db: Session = Depends(get_db)
):
    """Listar gastos de un departamento"""
    service = ExpensesService(db)
    return _to_responses(db, await service.get_expenses_by_department(department_id))


@router.get("/department/{department_id}/pending", response_model=List[ExpenseResponse])
async def get_department_pending_expenses(
    department_id: int,
    db: Session = Depends(get_db)
):
    """Listar gastos pendientes de aprobación de un departamento"""
    service = ExpensesService(db)
    return _to_responses(db, await service.get_pending_expenses_by_department(department_id))


@router.get("/{expense_id}", response_model=ExpenseResponse, responses=NOT_FOUND)
async def get_expense(
    expense_id: int,
    db: Session = Depends(get_db)
):
    """Obtener un gasto por id"""
    service = ExpensesService(db)
    outcome = await service.get_expense_by_id(expense_id)
    return _to_response(db, outcome.unwrap())


@router.put("/{expense_id}", response_model=ExpenseResponse, responses={**NOT_FOUND, **INVALID})
async def update_expense(
    expense_id: int,
    expense_details: ExpenseUpdateRequest,
    db: Session = Depends(get_db)
):
    """Actualizar descripción, monto, categoría o fecha de un gasto"""
    service = ExpensesService(db)
    outcome = await service.update_expense(expense_id, expense_details)
    return _to_response(db, outcome.unwrap())


@router.put("/{expense_id}/status", response_model=ExpenseResponse, responses=NOT_FOUND)
async def update_expense_status(
    expense_id: int,
    status: ExpenseStatus = Query(..., description="Nuevo estado del gasto"),
    db: Session = Depends(get_db)
):
    """
    Cambiar el estado de un gasto

    No se valida la transición: cualquier estado puede pasar a cualquier otro.
    """
    service = ExpensesService(db)
    outcome = await service.update_expense_status(expense_id, status)
    return _to_response(db, outcome.unwrap())


@router.delete("/{expense_id}", response_model=ExpenseDeletedResponse, responses=NOT_FOUND)
async def delete_expense(
    expense_id: int,
    db: Session = Depends(get_db)
):
    """Eliminar un gasto"""
    service = ExpensesService(db)
    outcome = await service.delete_expense(expense_id)
    outcome.unwrap()
    return ExpenseDeletedResponse(
        success=True,
        message="Gasto eliminado exitosamente",
        expense_id=expense_id
    )
