"""
HTTP tests for the /users router using a temporary storage file.
"""
from __future__ import annotations

import json
import shutil
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Garante que o pacote records_api seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from records_api.app import create_app  # noqa: E402
from records_api.core import config as core_config  # noqa: E402


@pytest.fixture()
def storage(tmp_path, monkeypatch) -> Path:
    """Aponta USER_STORAGE_PATH para um diretorio temporario e reseta o cache de settings."""
    storage_file = tmp_path / "data" / "user.json"
    monkeypatch.setenv("PROJECT_DIR", str(tmp_path))
    monkeypatch.setenv("USER_STORAGE_PATH", "data/user.json")
    monkeypatch.setenv("PAGE_SIZE_DEFAULT", "2")
    monkeypatch.setenv("PAGE_SIZE_MAX", "3")
    core_config.get_settings.cache_clear()
    yield storage_file
    core_config.get_settings.cache_clear()


@pytest.fixture()
def client(storage) -> TestClient:
    return TestClient(create_app())


def _create(client: TestClient, name: str, lastname: str) -> dict:
    resp = client.post("/users", json={"name": name, "lastname": lastname})
    assert resp.status_code == 201
    return resp.json()


def test_create_and_fetch_user(client, storage):
    body = _create(client, "Ada", "Lovelace")
    assert body == {"id": 1, "name": "Ada", "lastname": "Lovelace"}

    resp = client.get("/users/1")
    assert resp.status_code == 200
    assert resp.json() == body
    assert json.loads(storage.read_text(encoding="utf-8")) == [body]


def test_unknown_user_is_404(client):
    assert client.get("/users/99").status_code == 404
    assert client.put("/users/99", json={"name": "a", "lastname": "b"}).status_code == 404
    assert client.delete("/users/99").status_code == 404


def test_update_replaces_fields(client):
    _create(client, "Ada", "Lovelace")
    resp = client.put("/users/1", json={"name": "Augusta", "lastname": "King"})
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "name": "Augusta", "lastname": "King"}
    assert client.get("/users/1").json()["name"] == "Augusta"


def test_delete_then_get_is_404_and_ids_are_not_reused(client):
    _create(client, "Ada", "Lovelace")
    _create(client, "Alan", "Turing")
    assert client.delete("/users/1").status_code == 204
    assert client.get("/users/1").status_code == 404
    assert _create(client, "Grace", "Hopper")["id"] == 3


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "", "lastname": "Lovelace"},
        {"name": "Ada", "lastname": "   "},
        {"name": "Ada"},
        {},
    ],
)
def test_blank_or_missing_fields_are_rejected(client, storage, payload):
    resp = client.post("/users", json=payload)
    assert resp.status_code == 422
    assert not storage.exists()


def test_list_uses_default_page_size_and_offset(client):
    for i in range(5):
        _create(client, f"n{i}", f"l{i}")

    assert [u["id"] for u in client.get("/users").json()] == [1, 2]
    assert [u["id"] for u in client.get("/users", params={"amount": 3}).json()] == [1, 2, 3]
    assert [u["id"] for u in client.get("/users", params={"amount": 2, "offset": 3}).json()] == [4, 5]


def test_list_rejects_amount_above_max_page_size(client):
    _create(client, "Ada", "Lovelace")
    assert client.get("/users", params={"amount": 4}).status_code == 422
    assert client.get("/users", params={"amount": 50}).status_code == 422


def test_list_rejects_negative_offset(client):
    assert client.get("/users", params={"offset": -1}).status_code == 422
    assert client.get("/users", params={"amount": 0}).status_code == 422


def test_names_are_stored_as_submitted(client):
    body = _create(client, " Ada ", "Lovelace")
    assert body["name"] == " Ada "
    assert client.get(f"/users/{body['id']}").json()["name"] == " Ada "


def test_app_reloads_existing_storage(storage):
    storage.parent.mkdir(parents=True, exist_ok=True)
    storage.write_text(
        json.dumps([{"id": 2, "name": "Alan", "lastname": "Turing"}, {"id": 3, "name": "Grace", "lastname": "Hopper"}]),
        encoding="utf-8",
    )
    client = TestClient(create_app())
    assert [u["id"] for u in client.get("/users").json()] == [2, 3]
    assert client.get("/health").json() == {"status": "ok", "users": 2}


def test_storage_failure_is_500(client, storage):
    # data dir removed after start-up: the next flush cannot open the file
    shutil.rmtree(storage.parent)
    resp = client.post("/users", json={"name": "Ada", "lastname": "Lovelace"})
    assert resp.status_code == 500
    assert not storage.exists()
