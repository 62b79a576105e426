"""
Módulo de Gastos - Registro y Aprobación de Gastos

Este módulo maneja los gastos de los usuarios por departamento:
- Registro de gastos (siempre quedan PENDING)
- Consultas por usuario, departamento y estado
- Cambio de estado (aprobación / rechazo)
- Estadísticas mensuales para contabilidad

Arquitectura:
- router.py: Endpoints de gastos
- service.py: Validación y reglas de negocio
- repository.py: Acceso a datos de gastos
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import ExpensesService
from .repository import ExpensesRepository

__all__ = [
    "router",
    "ExpensesService",
    "ExpensesRepository"
]
