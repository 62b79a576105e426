"""
Script para crear departamentos y usuarios de prueba
Ejecutar desde la raíz del proyecto: python -m scripts.seed_reference_data
"""
import logging

from app.config.database import Base, SessionLocal, engine
from app.core.logging import init_logging
from app.shared.database.models import Department, User

logger = logging.getLogger(__name__)

DEPARTMENTS = ["Finanzas", "Ventas", "Operaciones", "Tecnología"]

USERS = [
    {"email": "contador@empresa.com", "full_name": "Ana Contadora"},
    {"email": "vendedor@empresa.com", "full_name": "Juan Vendedor"},
    {"email": "operaciones@empresa.com", "full_name": "Luis Operaciones"},
]


def seed_reference_data():
    """Crear tablas y datos de referencia si no existen"""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    try:
        if db.query(Department).count() == 0:
            db.add_all([Department(name=name) for name in DEPARTMENTS])
            logger.info(f"✅ {len(DEPARTMENTS)} departamentos creados")
        else:
            logger.info("Departamentos ya existentes, se omiten")

        if db.query(User).count() == 0:
            db.add_all([User(**user_data) for user_data in USERS])
            logger.info(f"✅ {len(USERS)} usuarios creados")
        else:
            logger.info("Usuarios ya existentes, se omiten")

        db.commit()
    except Exception:
        db.rollback()
        logger.exception("❌ Error creando datos de referencia")
        raise
    finally:
        db.close()


if __name__ == "__main__":
    init_logging()
    seed_reference_data()
