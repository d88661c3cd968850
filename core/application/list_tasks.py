import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from core.application.validation import normalize_limit, normalize_skip
from core.domain.models.task import TaskPage
from core.domain.ports.task_repository import TaskRepository

logger = logging.getLogger(__name__)

# Pool compartido: el conteo y la página se piden en paralelo.
executor = ThreadPoolExecutor(max_workers=8, thread_name_prefix="ListTasks")

FILTERABLE_FIELDS = ("importance", "status")


@dataclass(slots=True)
class ListTasksCommand:
    # Valores crudos de la query string; se normalizan sin lanzar errores.
    limit: Any = None
    skip: Any = None
    importance: str | None = None
    status: str | None = None


class ListTasksUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: ListTasksCommand) -> TaskPage:
        limit = normalize_limit(cmd.limit)
        skip = normalize_skip(cmd.skip)
        filters = {
            name: getattr(cmd, name)
            for name in FILTERABLE_FIELDS
            if getattr(cmd, name) is not None
        }

        future_total = executor.submit(self._repository.count, filters)
        future_tasks = executor.submit(self._repository.find, filters, skip, limit)
        total = future_total.result()
        tasks = future_tasks.result()

        logger.info(
            f"Listed {len(tasks)} of {total} tasks (filters={filters}, skip={skip}, limit={limit})"
        )
        return TaskPage(tasks=tasks, total=total, limit=limit, skip=skip)
