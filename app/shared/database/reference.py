# app/shared/database/reference.py
from sqlalchemy.orm import Session
from typing import Dict, Iterable

from app.shared.database.models import Department, User


class ReferenceRepository:
    """Resolución explícita de departamentos y usuarios por identificador"""

    def __init__(self, db: Session):
        self.db = db

    def department_names(self, department_ids: Iterable[int]) -> Dict[int, str]:
        ids = sorted({i for i in department_ids if i is not None})
        if not ids:
            return {}
        rows = self.db.query(Department.id, Department.name).filter(Department.id.in_(ids)).all()
        return {row.id: row.name for row in rows}

    def user_names(self, user_ids: Iterable[int]) -> Dict[int, str]:
        ids = sorted({i for i in user_ids if i is not None})
        if not ids:
            return {}
        rows = self.db.query(User.id, User.full_name).filter(User.id.in_(ids)).all()
        return {row.id: row.full_name for row in rows}
