from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from decimal import Decimal
from datetime import datetime
from app.shared.schemas.common import BaseResponse
from app.shared.schemas.expense_types import ExpenseCategory, ExpenseStatus


class ExpenseCreateRequest(BaseModel):
    """Payload de creación.

    Los campos son opcionales a nivel de esquema: las reglas de negocio
    (monto positivo, descripción, referencias obligatorias) las aplica el
    servicio para que creación y actualización validen igual.
    """
    amount: Optional[Decimal] = Field(None, description="Monto del gasto")
    description: Optional[str] = Field(None, description="Descripción del gasto")
    category: Optional[ExpenseCategory] = Field(None, description="Categoría del gasto")
    date: Optional[datetime] = Field(None, description="Fecha del gasto; hoy si se omite")
    department_id: Optional[int] = Field(None, description="Departamento al que se imputa")
    user_id: Optional[int] = Field(None, description="Usuario que registra el gasto")
    # Se acepta pero se ignora: todo gasto nuevo queda PENDING
    status: Optional[ExpenseStatus] = None


class ExpenseUpdateRequest(BaseModel):
    """Campos editables; los ausentes no se tocan"""
    amount: Optional[Decimal] = None
    description: Optional[str] = None
    category: Optional[ExpenseCategory] = None
    date: Optional[datetime] = None


class ExpenseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    amount: Decimal
    description: str
    category: ExpenseCategory
    date: datetime
    status: ExpenseStatus
    department_id: int
    user_id: int
    department_name: Optional[str] = None
    user_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AccountantStatisticsResponse(BaseResponse):
    total_pending: int
    total_approved: int
    monthly_total: Decimal
    period_start: datetime
    period_end: datetime


class ExpenseDeletedResponse(BaseResponse):
    expense_id: int
