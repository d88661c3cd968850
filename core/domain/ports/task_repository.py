from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from core.domain.models.task import Task


class TaskRepository(ABC):
    """
    Puerto de persistencia de tareas.

    Los filtros son un mapeo campo -> valor exacto; un mapeo vacío coincide
    con todas las tareas. Los fallos de persistencia se lanzan como
    StoreFailureError.
    """

    @abstractmethod
    def insert(self, task: Task) -> Task:
        raise NotImplementedError

    @abstractmethod
    def count(self, filters: Mapping[str, str]) -> int:
        raise NotImplementedError

    @abstractmethod
    def find(self, filters: Mapping[str, str], skip: int, limit: int) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: str) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def replace(self, task_id: str, task: Task) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def update(self, task_id: str, changes: Mapping[str, Any]) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: str) -> bool:
        raise NotImplementedError
