import os

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.replace_task import ReplaceTaskUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_repository import TaskRepository
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository

_memory_repository: InMemoryTaskRepository | None = None


def get_task_repository() -> TaskRepository:
    orm = os.getenv("ORM", "mongo").lower()

    if orm == "peewee":
        from infrastructure.peewee.repository.task_repository import (
            PeeweeTaskRepository,
        )

        return PeeweeTaskRepository()
    elif orm == "memory":
        # Una sola instancia por proceso.
        global _memory_repository
        if _memory_repository is None:
            _memory_repository = InMemoryTaskRepository()
        return _memory_repository
    # Default to MongoDB
    from infrastructure.mongo.repository.task_repository import MongoTaskRepository

    return MongoTaskRepository()


def get_create_task_use_case(repository: TaskRepository) -> CreateTaskUseCase:
    return CreateTaskUseCase(repository=repository)


def get_list_tasks_use_case(repository: TaskRepository) -> ListTasksUseCase:
    return ListTasksUseCase(repository=repository)


def get_get_task_use_case(repository: TaskRepository) -> GetTaskUseCase:
    return GetTaskUseCase(repository=repository)


def get_replace_task_use_case(repository: TaskRepository) -> ReplaceTaskUseCase:
    return ReplaceTaskUseCase(repository=repository)


def get_update_task_use_case(repository: TaskRepository) -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=repository)


def get_delete_task_use_case(repository: TaskRepository) -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=repository)
