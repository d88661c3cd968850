import logging
from dataclasses import dataclass

from core.application.validation import parse_importance, parse_status, require_title
from core.domain.models.task import Importance, Status, Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CreateTaskCommand:
    title: str | None = None
    description: str | None = None
    importance: Importance | str | None = None
    status: Status | str | None = None


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTaskCommand) -> Task:
        candidate = Task(
            title=require_title(cmd.title),
            description=cmd.description,
            importance=parse_importance(cmd.importance, default=Importance.MEDIUM),
            status=parse_status(cmd.status, default=Status.PENDING),
        )
        task = self._repository.insert(candidate)
        logger.info(f"Task {task.id} created")
        return task
