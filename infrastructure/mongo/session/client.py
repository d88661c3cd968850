import os
from typing import Any

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

_client: MongoClient[Any] | None = None


def get_client() -> MongoClient[Any]:
    """
    Cliente de MongoDB compartido por el proceso.

    No abre conexión hasta la primera operación, así que crearlo sin un
    servidor disponible no falla.
    """
    global _client
    if _client is None:
        _client = MongoClient(os.getenv("MONGO_URI", "mongodb://localhost:27017"))
    return _client


def get_db() -> Database[Any]:
    return get_client()[os.getenv("MONGO_DB_NAME", "tasks_api")]


def get_collection() -> Collection[Any]:
    """
    Colección de tareas configurada con MONGO_COLLECTION.

    Retorna:
        Collection: La colección donde viven los documentos de Task.
    """
    return get_db()[os.getenv("MONGO_COLLECTION", "tasks")]
