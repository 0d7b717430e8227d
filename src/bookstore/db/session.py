"""
Configuración y utilidades para la gestión de la sesión de base de datos SQLAlchemy.
Incluye la creación del motor, la fábrica de sesiones y la clase base para los modelos ORM.
Cada petición trabaja dentro de una única unidad de trabajo: una sesión y una
transacción que se confirma al terminar o se revierte si algo falla.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from bookstore.core.config import settings

logger = logging.getLogger(__name__)

connect_args = {"check_same_thread": False} if settings.is_sqlite else {}
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=settings.SQL_ECHO,
    connect_args=connect_args,
)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()

def init_db() -> None:
    """
    Crea todas las tablas registradas en `Base` si aún no existen.
    """
    # Registra los modelos en Base.metadata
    from bookstore import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Esquema de base de datos verificado.")

@contextmanager
def session_scope(factory: Optional[sessionmaker] = None) -> Iterator[Session]:
    """
    Unidad de trabajo explícita: abre una sesión, confirma al salir del bloque
    y revierte si se produce cualquier excepción.

    Args:
        factory (Optional[sessionmaker]): Fábrica de sesiones; por defecto `SessionLocal`.

    Yields:
        Session: Sesión de base de datos SQLAlchemy.
    """
    db = (factory or SessionLocal)()
    try:
        yield db
        db.commit()
    except Exception as e:
        logger.warning(f"Unidad de trabajo abortada ({type(e).__name__}); se revierte la transacción.")
        db.rollback()
        raise
    finally:
        db.close()

def get_db():
    """
    Proporciona una sesión de base de datos por petición (dependencia de FastAPI).

    Yields:
        Session: Sesión de base de datos SQLAlchemy.

    Ensures:
        La transacción se confirma si la petición termina bien, se revierte si no,
        y la sesión se cierra siempre.
    """
    with session_scope() as db:
        yield db
