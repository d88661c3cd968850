import threading
from collections.abc import Mapping
import dataclasses
from typing import Any
from uuid import uuid4

from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository


def _matches(task: Task, filters: Mapping[str, str]) -> bool:
    for name, expected in filters.items():
        value = getattr(task, name)
        if getattr(value, "value", value) != expected:
            return False
    return True


class InMemoryTaskRepository(TaskRepository):
    """
    Implementación de TaskRepository en memoria (dict ordenado por inserción).

    Pensada para tests y ejecuciones locales; el lock mantiene atómica cada
    llamada igual que lo haría una BDD.
    """

    def __init__(self) -> None:
        self._data: dict[str, Task] = {}
        self._lock = threading.Lock()

    def insert(self, task: Task) -> Task:
        stored = dataclasses.replace(task, id=uuid4().hex)
        with self._lock:
            self._data[stored.id] = stored
        return dataclasses.replace(stored)

    def count(self, filters: Mapping[str, str]) -> int:
        with self._lock:
            return sum(1 for t in self._data.values() if _matches(t, filters))

    def find(self, filters: Mapping[str, str], skip: int, limit: int) -> list[Task]:
        with self._lock:
            matching = [t for t in self._data.values() if _matches(t, filters)]
        return [dataclasses.replace(t) for t in matching[skip : skip + limit]]

    def get(self, task_id: str) -> Task | None:
        with self._lock:
            task = self._data.get(task_id)
        return dataclasses.replace(task) if task is not None else None

    def replace(self, task_id: str, task: Task) -> Task | None:
        with self._lock:
            if task_id not in self._data:
                return None
            self._data[task_id] = dataclasses.replace(task, id=task_id)
            return dataclasses.replace(self._data[task_id])

    def update(self, task_id: str, changes: Mapping[str, Any]) -> Task | None:
        with self._lock:
            current = self._data.get(task_id)
            if current is None:
                return None
            self._data[task_id] = dataclasses.replace(current, **changes)
            return dataclasses.replace(self._data[task_id])

    def delete(self, task_id: str) -> bool:
        with self._lock:
            return self._data.pop(task_id, None) is not None
