"""
Tests de la capa HTTP: códigos de estado, forma uniforme de errores y
contrato de paginación, con el repositorio en memoria inyectado.
"""

import logging
from unittest.mock import MagicMock, Mock

import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from backend_fastapi.api.deps import task_repository
from backend_fastapi.main import app
from core.domain.errors import StoreFailureError
from infrastructure.memory.repository.task_repository import InMemoryTaskRepository
from infrastructure.mongo.repository.task_repository import MongoTaskRepository
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository


@pytest.fixture
def repo():
    return InMemoryTaskRepository()


@pytest.fixture
def client(repo):
    app.dependency_overrides[task_repository] = lambda: repo
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _create(client, **fields):
    body = {"title": "Task", "importance": "Medium", "status": "Pending"}
    body.update(fields)
    response = client.post("/tasks", json=body)
    assert response.status_code == 201
    return response.json()


def test_create_devuelve_201_y_round_trip(client):
    body = {
        "title": "Write docs",
        "description": "API reference",
        "importance": "High",
        "status": "InProgress",
    }

    response = client.post("/tasks", json=body)

    assert response.status_code == 201
    created = response.json()
    assert created["id"]
    assert {k: created[k] for k in body} == body

    fetched = client.get(f"/tasks/{created['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == created


@pytest.mark.parametrize(
    "body, field",
    [
        ({"title": ""}, "title"),
        ({"description": "no title"}, "title"),
        ({"title": "x", "importance": "Urgent"}, "importance"),
        ({"title": "x", "status": "Archived"}, "status"),
    ],
)
def test_create_invalido_devuelve_400(client, repo, body, field):
    response = client.post("/tasks", json=body)

    assert response.status_code == 400
    payload = response.json()
    assert payload["message"]
    assert payload["field"] == field
    assert repo.count({}) == 0


def test_body_malformado_devuelve_400_uniforme(client):
    response = client.post(
        "/tasks", content="{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    payload = response.json()
    assert payload["message"] == "Invalid request data"
    assert payload["errors"]


def test_tipo_incorrecto_devuelve_400(client):
    response = client.post("/tasks", json={"title": ["a", "b"]})

    assert response.status_code == 400
    assert response.json()["message"] == "Invalid request data"


def test_list_por_defecto(client):
    created = [_create(client, title=f"t{i}") for i in range(3)]

    response = client.get("/tasks")

    assert response.status_code == 200
    assert response.json() == {"tasks": created, "total": 3, "limit": 20, "skip": 0}


def test_list_limit_se_limita_a_100(client):
    for i in range(105):
        _create(client, title=f"t{i}")

    page = client.get("/tasks", params={"limit": 500}).json()

    assert page["limit"] == 100
    assert len(page["tasks"]) == 100
    assert page["total"] == 105


@pytest.mark.parametrize("limit, skip", [("abc", "xyz"), ("-3", "-1"), ("", "")])
def test_list_valores_no_numericos_usan_default(client, limit, skip):
    _create(client)

    response = client.get("/tasks", params={"limit": limit, "skip": skip})

    assert response.status_code == 200
    page = response.json()
    assert (page["limit"], page["skip"]) == (20, 0)
    assert len(page["tasks"]) == 1


def test_list_filtra_por_status_y_total_independiente_de_pagina(client):
    for i in range(6):
        _create(client, title=f"t{i}", status="Done" if i < 4 else "Pending")

    page = client.get("/tasks", params={"status": "Done", "limit": 2, "skip": 1}).json()

    assert page["total"] == 4
    assert [t["title"] for t in page["tasks"]] == ["t1", "t2"]
    assert all(t["status"] == "Done" for t in page["tasks"])


def test_list_combina_filtros(client):
    _create(client, title="a", status="Done", importance="High")
    _create(client, title="b", status="Done", importance="Low")
    _create(client, title="c", status="Pending", importance="High")

    page = client.get("/tasks", params={"status": "Done", "importance": "High"}).json()

    assert page["total"] == 1
    assert page["tasks"][0]["title"] == "a"


@pytest.mark.parametrize(
    "method, kwargs",
    [
        ("get", {}),
        ("put", {"json": {"title": "x"}}),
        ("patch", {"json": {"status": "Done"}}),
        ("delete", {}),
    ],
)
def test_id_inexistente_devuelve_404(client, repo, method, kwargs):
    _create(client)

    response = getattr(client, method)("/tasks/missing", **kwargs)

    assert response.status_code == 404
    assert response.json() == {"message": "Task with id missing not found", "id": "missing"}
    assert repo.count({}) == 1


def test_put_sobrescribe_campos_omitidos(client):
    task = _create(client, description="old", importance="High", status="Done")

    response = client.put(f"/tasks/{task['id']}", json={"title": "renamed"})

    assert response.status_code == 200
    replaced = response.json()
    assert replaced == {
        "id": task["id"],
        "title": "renamed",
        "description": None,
        "importance": "Medium",
        "status": "Pending",
    }
    assert client.get(f"/tasks/{task['id']}").json() == replaced


def test_patch_solo_cambia_lo_enviado(client):
    task = _create(client, description="keep", importance="Low")

    response = client.patch(f"/tasks/{task['id']}", json={"status": "Done"})

    assert response.status_code == 200
    assert response.json() == {**task, "status": "Done"}


def test_patch_invalido_devuelve_400(client):
    task = _create(client)

    response = client.patch(f"/tasks/{task['id']}", json={"importance": "Huge"})

    assert response.status_code == 400
    assert response.json()["allowed"] == ["Low", "Medium", "High"]


def test_delete_204_y_luego_404(client):
    task = _create(client)

    first = client.delete(f"/tasks/{task['id']}")
    second = client.delete(f"/tasks/{task['id']}")

    assert first.status_code == 204
    assert first.content == b""
    assert second.status_code == 404
    assert second.json()["id"] == task["id"]


def test_fallo_del_store_devuelve_500_sin_detalles(client):
    failing = Mock(spec=InMemoryTaskRepository)
    failing.get.side_effect = StoreFailureError("get")
    app.dependency_overrides[task_repository] = lambda: failing

    response = client.get("/tasks/abc")

    assert response.status_code == 500
    assert response.json() == {"message": "Task store operation failed", "operation": "get"}


def test_excepcion_inesperada_devuelve_500_generico(client):
    failing = Mock(spec=InMemoryTaskRepository)
    failing.get.side_effect = RuntimeError("secret connection string")
    app.dependency_overrides[task_repository] = lambda: failing

    response = client.get("/tasks/abc")

    assert response.status_code == 500
    assert response.json() == {"message": "Something went wrong"}


def test_ruta_desconocida_usa_forma_uniforme(client):
    response = client.get("/nope")

    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


def _error_records(caplog):
    return [r for r in caplog.records if r.levelno >= logging.ERROR]


def test_fallo_del_store_se_registra_una_sola_vez(client, caplog):
    mongo_repo = MongoTaskRepository()
    mongo_repo.collection = MagicMock()
    mongo_repo.collection.find_one.side_effect = ServerSelectionTimeoutError("down")
    app.dependency_overrides[task_repository] = lambda: mongo_repo

    with caplog.at_level(logging.INFO):
        response = client.get("/tasks/abc")

    assert response.status_code == 500
    assert response.json() == {"message": "Task store operation failed", "operation": "get"}
    errors = _error_records(caplog)
    assert len(errors) == 1
    assert errors[0].getMessage() == "GET /tasks/abc -> 500: Task store operation failed"


def test_excepcion_inesperada_no_escapa_y_se_registra_una_vez(client, caplog):
    failing = Mock(spec=InMemoryTaskRepository)
    failing.count.side_effect = RuntimeError("boom")
    failing.find.return_value = []
    app.dependency_overrides[task_repository] = lambda: failing

    with caplog.at_level(logging.INFO):
        response = client.get("/tasks")

    assert response.status_code == 500
    assert response.json() == {"message": "Something went wrong"}
    assert len(_error_records(caplog)) == 1


def test_replace_con_enum_invalido_devuelve_400_sin_cambios(client, repo):
    task = _create(client, title="original", status="Pending")

    response = client.put(f"/tasks/{task['id']}", json={"title": "x", "status": "Archived"})

    assert response.status_code == 400
    payload = response.json()
    assert payload["field"] == "status"
    assert payload["allowed"] == ["Pending", "InProgress", "Done"]
    assert client.get(f"/tasks/{task['id']}").json() == task


@pytest.fixture
def peewee_client():
    peewee_repo = PeeweeTaskRepository()
    TaskModel.delete().execute()
    app.dependency_overrides[task_repository] = lambda: peewee_repo
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    TaskModel.delete().execute()


def test_list_sobre_peewee_con_skip_enorme(peewee_client):
    for i in range(3):
        assert peewee_client.post("/tasks", json={"title": f"t{i}"}).status_code == 201

    response = peewee_client.get("/tasks", params={"skip": "99999999999999999999"})

    assert response.status_code == 200
    assert response.json() == {"tasks": [], "total": 3, "limit": 20, "skip": 2**63 - 1}


def test_list_sobre_peewee_filtra_y_pagina(peewee_client):
    for i in range(4):
        peewee_client.post("/tasks", json={"title": f"t{i}", "importance": "High" if i % 2 else "Low"})

    page = peewee_client.get("/tasks", params={"importance": "High"}).json()

    assert page["total"] == 2
    assert [t["title"] for t in page["tasks"]] == ["t1", "t3"]
