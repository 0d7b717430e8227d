"""
Configuración del logging de la aplicación.
Todos los módulos registran a través de `logging.getLogger(__name__)`; aquí solo
se fija el formato y el nivel del logger raíz.
"""

import logging

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logging(level: str = "INFO") -> None:
    """
    Configura el logger raíz con el formato común del servicio.

    Args:
        level (str): Nombre del nivel de logging (por ejemplo "INFO" o "DEBUG").
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT)
    logging.getLogger(__name__).debug(f"Logging configurado con nivel {level.upper()}")
