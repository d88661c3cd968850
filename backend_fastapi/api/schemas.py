from pydantic import BaseModel


class TaskPayload(BaseModel):
    """
    Cuerpo JSON de create/replace/update.

    Los enums llegan como texto; la pertenencia la valida el caso de uso.
    """

    title: str | None = None
    description: str | None = None
    importance: str | None = None
    status: str | None = None
