"""
Errores de dominio del recurso Task.

Cada error lleva un status HTTP equivalente, un mensaje legible y metadatos
opcionales que el responder de errores vuelca en el cuerpo de la respuesta.
"""

from typing import Any


class TaskError(Exception):
    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message: str | None = None, **meta: Any) -> None:
        self.message = message or self.default_message
        self.meta: dict[str, Any] = meta
        super().__init__(self.message)


class ValidationFailedError(TaskError):
    status_code = 400
    default_message = "Invalid task data"


class TaskNotFoundError(TaskError):
    status_code = 404
    default_message = "Task not found"

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Task with id {task_id} not found", id=task_id)
        self.task_id = task_id


class StoreFailureError(TaskError):
    status_code = 500
    default_message = "Task store operation failed"

    def __init__(self, operation: str) -> None:
        super().__init__(self.default_message, operation=operation)
        self.operation = operation


class InternalError(TaskError):
    status_code = 500
