import logging
from dataclasses import dataclass, field
from typing import Any

from core.application.get_task import GetTaskUseCase
from core.application.validation import parse_importance, parse_status, require_title
from core.domain.errors import TaskNotFoundError, ValidationFailedError
from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("title", "description", "importance", "status")


@dataclass(slots=True)
class UpdateTaskCommand:
    # Solo contiene los campos presentes en la petición.
    changes: dict[str, Any] = field(default_factory=dict)


def _normalize_changes(changes: dict[str, Any]) -> dict[str, Any]:
    unknown = sorted(set(changes) - set(UPDATABLE_FIELDS))
    if unknown:
        raise ValidationFailedError(
            f"Unknown fields: {', '.join(unknown)}", fields=unknown
        )

    normalized: dict[str, Any] = {}
    if "title" in changes:
        normalized["title"] = require_title(changes["title"])
    if "description" in changes:
        normalized["description"] = changes["description"]
    if "importance" in changes:
        normalized["importance"] = parse_importance(changes["importance"])
    if "status" in changes:
        normalized["status"] = parse_status(changes["status"])
    return normalized


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: str, cmd: UpdateTaskCommand) -> Task:
        changes = _normalize_changes(cmd.changes)
        GetTaskUseCase(self._repository).execute(task_id)

        task = self._repository.update(task_id, changes)
        if task is None:
            raise TaskNotFoundError(task_id)
        logger.info(f"Task {task_id} updated ({', '.join(changes) or 'no changes'})")
        return task
