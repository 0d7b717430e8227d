"""
Referencia mínima a una entidad existente, identificada solo por su id.
Se usa en los cuerpos que reemplazan colecciones y para indicar la editorial de un libro.
"""

from pydantic import BaseModel, ConfigDict

class EntityRef(BaseModel):
    """
    Referencia por identificador. Cualquier otro campo del cuerpo se ignora.

    Atributos:
        id (int): ID de la entidad referenciada.
    """
    id: int

    model_config = ConfigDict(from_attributes=True, extra="ignore")
