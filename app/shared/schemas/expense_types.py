# app/shared/schemas/expense_types.py

"""
Enumeraciones compartidas entre modelos ORM y schemas de gastos
"""

from enum import Enum


class ExpenseStatus(str, Enum):
    """Estado de aprobación del gasto"""
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class ExpenseCategory(str, Enum):
    """Categorías de gasto soportadas"""
    TRAVEL = "TRAVEL"
    MEALS = "MEALS"
    LODGING = "LODGING"
    SUPPLIES = "SUPPLIES"
    EQUIPMENT = "EQUIPMENT"
    TRAINING = "TRAINING"
    OTHER = "OTHER"
