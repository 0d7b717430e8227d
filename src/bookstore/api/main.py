"""
Aplicación FastAPI del catálogo de la librería.

Las rutas se registran explícitamente bajo `settings.API_PREFIX`. El esquema de la
base de datos se crea al arrancar.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..core.config import settings
from ..core.logging_config import setup_logging
from ..db.session import init_db
from .error_handlers import register_error_handlers
from .routes import authors, books, editorials, reviews

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info(f"Bookstore API iniciada (entorno: {settings.ENVIRONMENT})")
    yield
    logger.info("Bookstore API detenida")


def create_app() -> FastAPI:
    """
    Construye la aplicación con sus rutas y manejadores de errores.

    Returns:
        FastAPI: Aplicación lista para servir.
    """
    setup_logging(settings.LOG_LEVEL)
    app = FastAPI(
        title="Bookstore API",
        description="Catálogo de libros, autores, editoriales y reseñas.",
        version="1.0.0",
        lifespan=lifespan,
    )

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    for module in (books, reviews, authors, editorials):
        app.include_router(module.router, prefix=settings.API_PREFIX)

    register_error_handlers(app)
    return app


app = create_app()
