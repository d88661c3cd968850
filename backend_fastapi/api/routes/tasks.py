from fastapi import APIRouter, Depends, Query, status

from backend_fastapi.api.deps import (
    create_task_use_case,
    delete_task_use_case,
    get_task_use_case,
    list_tasks_use_case,
    replace_task_use_case,
    update_task_use_case,
)
from backend_fastapi.api.schemas import TaskPayload
from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksCommand, ListTasksUseCase
from core.application.replace_task import ReplaceTaskCommand, ReplaceTaskUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.models.task import Task, TaskPage

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.post(
    "",
    response_model=Task,
    status_code=status.HTTP_201_CREATED,
    summary="Crear una tarea",
)
def create_task(
    payload: TaskPayload,
    use_case: CreateTaskUseCase = Depends(create_task_use_case),
) -> Task:
    """
    Crea una nueva tarea.

    - **title**: Título (obligatorio).
    - **description**: Descripción opcional.
    - **importance**: Low, Medium o High (por defecto Medium).
    - **status**: Pending, InProgress o Done (por defecto Pending).
    """
    return use_case.execute(CreateTaskCommand(**payload.model_dump()))


@router.get(
    "",
    response_model=TaskPage,
    summary="Listar tareas",
)
def list_tasks(
    # Texto crudo: valores no numéricos caen al default en vez de dar 400.
    limit: str | None = Query(None),
    skip: str | None = Query(None),
    importance: str | None = Query(None),
    status_: str | None = Query(None, alias="status"),
    use_case: ListTasksUseCase = Depends(list_tasks_use_case),
) -> TaskPage:
    """
    Lista tareas paginadas y filtradas.

    - **limit**: Por defecto 20, máximo 100.
    - **skip**: Por defecto 0.
    - **importance** / **status**: Filtros de coincidencia exacta.
    """
    return use_case.execute(
        ListTasksCommand(limit=limit, skip=skip, importance=importance, status=status_)
    )


@router.get(
    "/{task_id}",
    response_model=Task,
    summary="Obtener una tarea",
)
def get_task(
    task_id: str,
    use_case: GetTaskUseCase = Depends(get_task_use_case),
) -> Task:
    return use_case.execute(task_id)


@router.put(
    "/{task_id}",
    response_model=Task,
    summary="Reemplazar una tarea",
)
def replace_task(
    task_id: str,
    payload: TaskPayload,
    use_case: ReplaceTaskUseCase = Depends(replace_task_use_case),
) -> Task:
    """
    Sustituye la tarea completa; los campos omitidos no se conservan.
    """
    return use_case.execute(task_id, ReplaceTaskCommand(**payload.model_dump()))


@router.patch(
    "/{task_id}",
    response_model=Task,
    summary="Actualizar una tarea",
)
def update_task(
    task_id: str,
    payload: TaskPayload,
    use_case: UpdateTaskUseCase = Depends(update_task_use_case),
) -> Task:
    """
    Actualiza solo los campos enviados.
    """
    return use_case.execute(
        task_id, UpdateTaskCommand(changes=payload.model_dump(exclude_unset=True))
    )


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Eliminar una tarea",
)
def delete_task(
    task_id: str,
    use_case: DeleteTaskUseCase = Depends(delete_task_use_case),
) -> None:
    use_case.execute(task_id)
