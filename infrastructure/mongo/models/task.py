from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from core.domain.models.task import Importance, Status, Task


class TaskMongo(BaseModel):
    """
    Modelo de Task para MongoDB.
    Representa cómo se almacena la tarea en la colección.
    """

    id: str = Field(alias="_id")
    title: str
    description: str | None = None
    importance: str
    status: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = {"populate_by_name": True, "extra": "ignore"}

    def to_domain(self) -> Task:
        """
        Convierte el documento de MongoDB al modelo de dominio.

        Retorna:
            Task: La entidad de dominio.
        """
        return Task(
            id=self.id,
            title=self.title,
            description=self.description,
            importance=Importance(self.importance),
            status=Status(self.status),
        )

    @classmethod
    def from_domain(cls, task_id: str, task: Task) -> "TaskMongo":
        """
        Crea un TaskMongo a partir de una entidad de dominio.

        Argumentos:
            task_id (str): El _id asignado al documento.
            task (Task): La entidad de dominio.

        Retorna:
            TaskMongo: El documento de MongoDB.
        """
        return cls(
            id=task_id,
            title=task.title,
            description=task.description,
            importance=task.importance.value,
            status=task.status.value,
        )


def to_document_fields(changes: dict[str, Any]) -> dict[str, Any]:
    """Traduce valores de dominio (enums) a valores almacenables."""
    return {
        name: value.value if isinstance(value, (Importance, Status)) else value
        for name, value in changes.items()
    }
