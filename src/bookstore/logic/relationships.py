"""
Gestión de relaciones entre entidades del catálogo.

Dos formas de relación, descritas de forma genérica sobre un par padre/hijo:

- `ManyToManyRelation`: Book <-> Author a través de la tabla `book_author`. La
  asociación se crea y se borra por ID directamente sobre la tabla; el hijo no se
  carga ni se valida antes de asociarlo.
- `OneToManyRelation`: Editorial -> Book, donde la clave foránea vive en el hijo y
  "añadir" significa asignar la referencia del hijo al padre.

En ambas, la pertenencia se comprueba solo por ID y un padre inexistente produce
`EntityNotFoundError`. Un hijo que no pertenece al padre se devuelve como None.
"""

import logging
from typing import Callable, Iterable, List, Optional, TypeVar

from sqlalchemy import Table
from sqlalchemy.orm import Session

from ..core.errors import EntityNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def find_by_id(items: Iterable[T], entity_id: int) -> Optional[T]:
    """
    Busca en una colección el elemento cuyo `id` es `entity_id`.

    Solo se compara el identificador; el resto de campos no interviene.

    Args:
        items (Iterable): Colección de entidades.
        entity_id (int): ID buscado.

    Returns:
        Optional: El primer elemento con ese ID o None.
    """
    for item in items:
        if item.id == entity_id:
            return item
    return None


class _Relation:
    def __init__(
        self,
        parent_model,
        child_model,
        collection: str,
        load_children: Callable[[Session, List[int]], list],
    ):
        self.parent_model = parent_model
        self.child_model = child_model
        self.collection = collection
        self.load_children = load_children

    @property
    def parent_name(self) -> str:
        return self.parent_model.__name__

    @property
    def child_name(self) -> str:
        return self.child_model.__name__

    def _get_parent(self, db: Session, parent_id: int):
        parent = db.get(self.parent_model, parent_id)
        if parent is None:
            logger.warning(f"{self.parent_name} con id={parent_id} no existe")
            raise EntityNotFoundError(self.parent_name, parent_id)
        return parent

    def _load_exactly(self, db: Session, child_ids: List[int]) -> list:
        unique_ids = list(dict.fromkeys(child_ids))
        children = self.load_children(db, unique_ids)
        missing = set(unique_ids) - {child.id for child in children}
        if missing:
            missing_id = min(missing)
            logger.warning(f"{self.child_name} con id={missing_id} no existe; no se reemplaza la colección")
            raise EntityNotFoundError(self.child_name, missing_id)
        return children

    def list_children(self, db: Session, parent_id: int) -> list:
        """Hijos asociados actualmente al padre."""
        parent = self._get_parent(db, parent_id)
        return list(getattr(parent, self.collection))

    def get_child(self, db: Session, parent_id: int, child_id: int):
        """Hijo `child_id` si pertenece al padre; None en caso contrario."""
        child = find_by_id(self.list_children(db, parent_id), child_id)
        if child is None:
            logger.info(f"{self.child_name} {child_id} no está asociado a {self.parent_name} {parent_id}")
        return child


class ManyToManyRelation(_Relation):
    """
    Relación muchos a muchos vista desde uno de sus lados.

    Args:
        parent_model: Modelo ORM del lado desde el que se opera.
        child_model: Modelo ORM del otro lado.
        collection (str): Atributo de colección en el padre (p. ej. "authors").
        inverse (str): Atributo de colección inverso en el hijo (p. ej. "books").
        table (Table): Tabla de asociación.
        parent_key (str): Columna de la tabla que apunta al padre.
        child_key (str): Columna de la tabla que apunta al hijo.
        load_children: Función del gateway que carga hijos por lista de IDs.
    """

    def __init__(
        self,
        parent_model,
        child_model,
        collection: str,
        inverse: str,
        table: Table,
        parent_key: str,
        child_key: str,
        load_children: Callable[[Session, List[int]], list],
    ):
        super().__init__(parent_model, child_model, collection, load_children)
        self.inverse = inverse
        self.table = table
        self.parent_key = parent_key
        self.child_key = child_key

    def _expire(self, db: Session, parent, child_ids: Iterable[int]) -> None:
        db.expire(parent, [self.collection])
        for child_id in child_ids:
            child = db.identity_map.get(db.identity_key(self.child_model, child_id))
            if child is not None:
                db.expire(child, [self.inverse])

    def add_child(self, db: Session, parent_id: int, child_id: int):
        """
        Asocia el hijo al padre usando solo su ID y devuelve el hijo asociado.

        Si el hijo ya pertenece al padre no se crea una segunda membresía. Si el ID
        del hijo no existe, la fila de asociación se inserta igualmente y el
        resultado es None.
        """
        parent = self._get_parent(db, parent_id)
        existing = find_by_id(getattr(parent, self.collection), child_id)
        if existing is not None:
            logger.info(f"{self.child_name} {child_id} ya estaba asociado a {self.parent_name} {parent_id}")
            return existing
        db.flush()
        db.execute(
            self.table.insert().values({self.parent_key: parent_id, self.child_key: child_id})
        )
        self._expire(db, parent, [child_id])
        return self.get_child(db, parent_id, child_id)

    def replace_children(self, db: Session, parent_id: int, child_ids: List[int]) -> list:
        """
        Sustituye la colección completa del padre por los hijos de `child_ids`.
        Los hijos que no estén en la lista pierden la asociación.
        """
        parent = self._get_parent(db, parent_id)
        children = self._load_exactly(db, child_ids)
        previous_ids = [child.id for child in getattr(parent, self.collection)]
        setattr(parent, self.collection, children)
        db.flush()
        self._expire(db, parent, set(previous_ids) | {child.id for child in children})
        return list(getattr(parent, self.collection))

    def remove_child(self, db: Session, parent_id: int, child_id: int) -> None:
        """Desasocia el hijo del padre. No hace nada si no estaba asociado."""
        parent = self._get_parent(db, parent_id)
        db.flush()
        result = db.execute(
            self.table.delete().where(
                self.table.c[self.parent_key] == parent_id,
                self.table.c[self.child_key] == child_id,
            )
        )
        if result.rowcount == 0:
            logger.info(f"{self.child_name} {child_id} no estaba asociado a {self.parent_name} {parent_id}")
        self._expire(db, parent, [child_id])


class OneToManyRelation(_Relation):
    """
    Relación uno a muchos vista desde el lado "uno".

    Args:
        parent_model: Modelo ORM del lado "uno" (p. ej. Editorial).
        child_model: Modelo ORM del lado "muchos" (p. ej. Book).
        collection (str): Colección en el padre (p. ej. "books").
        reference (str): Atributo del hijo que apunta al padre (p. ej. "editorial").
        load_children: Función del gateway que carga hijos por lista de IDs.
    """

    def __init__(
        self,
        parent_model,
        child_model,
        collection: str,
        reference: str,
        load_children: Callable[[Session, List[int]], list],
    ):
        super().__init__(parent_model, child_model, collection, load_children)
        self.reference = reference

    def add_child(self, db: Session, parent_id: int, child_id: int):
        """
        Asigna al hijo existente `child_id` la referencia al padre y lo devuelve.
        El hijo tiene que existir, porque la clave foránea vive en él.
        """
        parent = self._get_parent(db, parent_id)
        child = db.get(self.child_model, child_id)
        if child is None:
            logger.warning(f"{self.child_name} con id={child_id} no existe")
            raise EntityNotFoundError(self.child_name, child_id)
        setattr(child, self.reference, parent)
        db.flush()
        return child

    def replace_children(self, db: Session, parent_id: int, child_ids: List[int]) -> list:
        """
        Sustituye los hijos del padre: los actuales que no estén en `child_ids`
        quedan sin referencia y los de la lista pasan a apuntar al padre.
        """
        parent = self._get_parent(db, parent_id)
        children = self._load_exactly(db, child_ids)
        new_ids = {child.id for child in children}
        for current in list(getattr(parent, self.collection)):
            if current.id not in new_ids:
                setattr(current, self.reference, None)
        for child in children:
            setattr(child, self.reference, parent)
        db.flush()
        db.expire(parent, [self.collection])
        return list(getattr(parent, self.collection))

    def remove_child(self, db: Session, parent_id: int, child_id: int) -> None:
        """Quita la referencia al padre del hijo si le pertenece; si no, no hace nada."""
        parent = self._get_parent(db, parent_id)
        child = find_by_id(getattr(parent, self.collection), child_id)
        if child is None:
            logger.info(f"{self.child_name} {child_id} no pertenece a {self.parent_name} {parent_id}")
            return
        setattr(child, self.reference, None)
        db.flush()
