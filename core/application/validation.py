from enum import Enum
from typing import Any, TypeVar

from core.domain.errors import ValidationFailedError
from core.domain.models.task import Importance, Status

E = TypeVar("E", bound=Enum)

DEFAULT_LIMIT = 20
MAX_LIMIT = 100
DEFAULT_SKIP = 0
# Mayor entero que aceptan SQLite (INTEGER) y BSON (int64).
MAX_STORE_INT = 2**63 - 1


def require_title(title: Any) -> str:
    if not isinstance(title, str) or not title.strip():
        raise ValidationFailedError("Title is required", field="title")
    return title


def parse_enum(enum_cls: type[E], field: str, value: Any, default: E | None = None) -> E:
    """
    Convierte un valor crudo en un miembro del enum.

    Si el valor es None y hay default, se usa el default. Cualquier valor
    fuera del enum se rechaza con ValidationFailedError.
    """
    if isinstance(value, enum_cls):
        return value
    if value is None and default is not None:
        return default
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationFailedError(
            f"Invalid {field}: {value!r}",
            field=field,
            value=value,
            allowed=[member.value for member in enum_cls],
        ) from None


def parse_importance(value: Any, default: Importance | None = None) -> Importance:
    return parse_enum(Importance, "importance", value, default)


def parse_status(value: Any, default: Status | None = None) -> Status:
    return parse_enum(Status, "status", value, default)


def coerce_non_negative(value: Any, default: int) -> int:
    """Conversión numérica que nunca lanza: lo no parseable o negativo vale el default."""
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    if number < 0:
        return default
    return min(number, MAX_STORE_INT)


def normalize_limit(value: Any) -> int:
    limit = coerce_non_negative(value, DEFAULT_LIMIT)
    if limit == 0:
        return DEFAULT_LIMIT
    return min(limit, MAX_LIMIT)


def normalize_skip(value: Any) -> int:
    return coerce_non_negative(value, DEFAULT_SKIP)
