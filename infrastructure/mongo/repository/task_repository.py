from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from typing import Any
from uuid import uuid4

from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from core.domain.errors import StoreFailureError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.mongo.models.task import TaskMongo, to_document_fields
from infrastructure.mongo.session.client import get_collection

_ORDER = [("created_at", ASCENDING), ("_id", ASCENDING)]


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    try:
        yield
    except PyMongoError as e:
        raise StoreFailureError(operation) from e


class MongoTaskRepository(TaskRepository):
    """
    Implementación de TaskRepository usando MongoDB (Synchronous).
    """

    def __init__(self) -> None:
        self.collection: Collection[Any] = get_collection()

    def insert(self, task: Task) -> Task:
        """
        Inserta una tarea nueva con un _id generado.

        Argumentos:
            task (Task): La tarea candidata (sin id).

        Retorna:
            Task: La tarea almacenada, con su id.
        """
        doc = TaskMongo.from_domain(uuid4().hex, task)
        with _store_errors("insert"):
            self.collection.insert_one(doc.model_dump(by_alias=True))
        return doc.to_domain()

    def count(self, filters: Mapping[str, str]) -> int:
        with _store_errors("count"):
            return self.collection.count_documents(dict(filters))

    def find(self, filters: Mapping[str, str], skip: int, limit: int) -> list[Task]:
        """
        Lista las tareas que cumplen los filtros, en orden de inserción.

        Argumentos:
            filters: Campos con su valor exacto.
            skip (int): Cuántas tareas saltar.
            limit (int): Máximo de tareas a devolver.
        """
        with _store_errors("find"):
            docs = list(
                self.collection.find(dict(filters)).sort(_ORDER).skip(skip).limit(limit)
            )
        return [TaskMongo(**doc).to_domain() for doc in docs]

    def get(self, task_id: str) -> Task | None:
        """
        Obtiene una tarea por su ID.

        Retorna:
            Task | None: La tarea encontrada o None si no existe.
        """
        with _store_errors("get"):
            doc = self.collection.find_one({"_id": task_id})
        if not doc:
            return None
        return TaskMongo(**doc).to_domain()

    def replace(self, task_id: str, task: Task) -> Task | None:
        """
        Sustituye todos los campos de la tarea. Sin upsert: si el _id no
        existe devuelve None.
        """
        fields = TaskMongo.from_domain(task_id, task).model_dump(
            by_alias=True, exclude={"id", "created_at"}
        )
        with _store_errors("replace"):
            doc = self.collection.find_one_and_update(
                {"_id": task_id},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        if not doc:
            return None
        return TaskMongo(**doc).to_domain()

    def update(self, task_id: str, changes: Mapping[str, Any]) -> Task | None:
        """
        Aplica solo los campos recibidos; el resto queda intacto.
        """
        if not changes:
            return self.get(task_id)

        with _store_errors("update"):
            doc = self.collection.find_one_and_update(
                {"_id": task_id},
                {"$set": to_document_fields(dict(changes))},
                return_document=ReturnDocument.AFTER,
            )
        if not doc:
            return None
        return TaskMongo(**doc).to_domain()

    def delete(self, task_id: str) -> bool:
        """
        Elimina una tarea por su ID.

        Retorna:
            bool: True si se eliminó un documento.
        """
        with _store_errors("delete"):
            result = self.collection.delete_one({"_id": task_id})
        return result.deleted_count == 1
