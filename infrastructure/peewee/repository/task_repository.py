from collections.abc import Mapping
from typing import Any
from uuid import uuid4

from peewee import PeeweeException

from core.domain.errors import StoreFailureError
from core.domain.models.task import Importance, Status, Task
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.session.db import db


def _to_domain(model: TaskModel) -> Task:
    return Task(
        id=model.id,
        title=model.title,
        description=model.description,
        importance=Importance(model.importance),
        status=Status(model.status),
    )


def _to_columns(fields: Mapping[str, Any]) -> dict[str, Any]:
    return {
        name: value.value if isinstance(value, (Importance, Status)) else value
        for name, value in fields.items()
    }


def _where(filters: Mapping[str, str]):
    query = TaskModel.select()
    for name, value in filters.items():
        query = query.where(getattr(TaskModel, name) == value)
    return query


class PeeweeTaskRepository(TaskRepository):
    def __init__(self):
        db.connect(reuse_if_open=True)
        db.create_tables([TaskModel], safe=True)

    def insert(self, task: Task) -> Task:
        try:
            model = TaskModel.create(
                id=uuid4().hex,
                title=task.title,
                description=task.description,
                importance=task.importance.value,
                status=task.status.value,
            )
        except PeeweeException as e:
            raise StoreFailureError("insert") from e
        return _to_domain(model)

    def count(self, filters: Mapping[str, str]) -> int:
        try:
            return _where(filters).count()
        except PeeweeException as e:
            raise StoreFailureError("count") from e

    def find(self, filters: Mapping[str, str], skip: int, limit: int) -> list[Task]:
        try:
            query = (
                _where(filters)
                .order_by(TaskModel.created_at, TaskModel.id)
                .offset(skip)
                .limit(limit)
            )
            return [_to_domain(t) for t in query]
        except PeeweeException as e:
            raise StoreFailureError("find") from e

    def get(self, task_id: str) -> Task | None:
        try:
            model = TaskModel.get_or_none(TaskModel.id == task_id)
        except PeeweeException as e:
            raise StoreFailureError("get") from e
        return _to_domain(model) if model is not None else None

    def replace(self, task_id: str, task: Task) -> Task | None:
        return self._write(
            "replace",
            task_id,
            {
                "title": task.title,
                "description": task.description,
                "importance": task.importance,
                "status": task.status,
            },
        )

    def update(self, task_id: str, changes: Mapping[str, Any]) -> Task | None:
        if not changes:
            return self.get(task_id)
        return self._write("update", task_id, changes)

    def delete(self, task_id: str) -> bool:
        try:
            deleted = TaskModel.delete().where(TaskModel.id == task_id).execute()
        except PeeweeException as e:
            raise StoreFailureError("delete") from e
        return deleted > 0

    def _write(self, operation: str, task_id: str, fields: Mapping[str, Any]) -> Task | None:
        try:
            with db.atomic():
                updated = (
                    TaskModel.update(**_to_columns(fields))
                    .where(TaskModel.id == task_id)
                    .execute()
                )
                if not updated:
                    return None
                return _to_domain(TaskModel.get_by_id(task_id))
        except PeeweeException as e:
            raise StoreFailureError(operation) from e
