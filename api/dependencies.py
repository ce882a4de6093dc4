"""
Dependencias de FastAPI.

Este módulo proporciona dependencias reutilizables para:
- Obtener una sesión de base de datos por request
"""

from typing import Generator

from sqlalchemy.orm import Session

from vitaspoon_core.db.database import get_db_session


def get_db() -> Generator[Session, None, None]:
    """
    Dependencia de FastAPI para obtener una sesión de base de datos.

    Reutiliza `get_db_session`: commit al terminar el request, rollback si
    el endpoint lanza.
    """
    with get_db_session() as session:
        yield session
