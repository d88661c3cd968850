import logging
from dataclasses import dataclass

from core.application.get_task import GetTaskUseCase
from core.application.validation import parse_importance, parse_status, require_title
from core.domain.errors import TaskNotFoundError
from core.domain.models.task import Importance, Status, Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ReplaceTaskCommand:
    title: str | None = None
    description: str | None = None
    importance: Importance | str | None = None
    status: Status | str | None = None


class ReplaceTaskUseCase:
    """
    Sustituye la tarea completa. Los campos omitidos no conservan su valor
    anterior: la descripción pasa a None y los enums vuelven a su default.
    """

    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: str, cmd: ReplaceTaskCommand) -> Task:
        replacement = Task(
            id=task_id,
            title=require_title(cmd.title),
            description=cmd.description,
            importance=parse_importance(cmd.importance, default=Importance.MEDIUM),
            status=parse_status(cmd.status, default=Status.PENDING),
        )
        GetTaskUseCase(self._repository).execute(task_id)

        task = self._repository.replace(task_id, replacement)
        if task is None:
            raise TaskNotFoundError(task_id)
        logger.info(f"Task {task_id} replaced")
        return task
