from datetime import datetime, timezone

from peewee import Model, CharField, DateTimeField, TextField
from infrastructure.peewee.session.db import db


def _now() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TaskModel(Model):
    id = CharField(primary_key=True, max_length=32)
    title = CharField()
    description = TextField(null=True)
    importance = CharField(index=True)
    status = CharField(index=True)
    # Solo para ordenar por inserción; no se expone.
    created_at = DateTimeField(default=_now)

    class Meta:
        database = db
        table_name = "tasks"
