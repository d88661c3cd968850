from dataclasses import dataclass
from enum import Enum


class Importance(Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Status(Enum):
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    DONE = "Done"


@dataclass(slots=True)
class Task:
    title: str
    description: str | None = None
    importance: Importance = Importance.MEDIUM
    status: Status = Status.PENDING
    id: str | None = None


@dataclass(slots=True)
class TaskPage:
    tasks: list[Task]
    total: int
    limit: int
    skip: int
