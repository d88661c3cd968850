import logging

from core.application.get_task import GetTaskUseCase
from core.domain.errors import TaskNotFoundError
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


class DeleteTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: str) -> None:
        GetTaskUseCase(self._repository).execute(task_id)
        if not self._repository.delete(task_id):
            raise TaskNotFoundError(task_id)
        logger.info(f"Task {task_id} deleted")
