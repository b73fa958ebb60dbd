from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Request, Response

from records_api.core.config import get_settings
from records_api.domain.errors import NotFoundError, StorageError
from records_api.domain.users import UserEntity, UserInput, UserResponse
from records_api.repositories.json_user_repository import JsonUserRepository

router = APIRouter(prefix="/users", tags=["users"])


def _get_repository(request: Request) -> JsonUserRepository:
    repo = getattr(getattr(request.app, "state", None), "user_repository", None)
    if repo is None:
        raise RuntimeError("JsonUserRepository nao configurado")
    return repo


def _find_or_404(repo: JsonUserRepository, user_id: int) -> UserEntity:
    try:
        return repo.find_one_by_id(user_id)
    except NotFoundError:
        raise HTTPException(404, "Usuario nao encontrado")


def _storage_failure(exc: StorageError) -> HTTPException:
    return HTTPException(500, f"Falha no armazenamento: {exc}")


@router.get("", response_model=list[UserResponse])
def list_users(
    request: Request,
    amount: int | None = Query(None, ge=1),
    offset: int = Query(0, ge=0),
):
    settings = get_settings()
    if amount is not None and amount > settings.max_page_size:
        raise HTTPException(422, f"amount deve estar entre 1 e {settings.max_page_size}")
    size = amount or settings.default_page_size
    repo = _get_repository(request)
    return [UserResponse.from_entity(u) for u in repo.list_users(size, offset)]


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: int, request: Request):
    user = _find_or_404(_get_repository(request), user_id)
    return UserResponse.from_entity(user)


@router.post("", response_model=UserResponse, status_code=201)
def create_user(payload: UserInput, request: Request):
    repo = _get_repository(request)
    try:
        user = repo.upsert(payload)
    except StorageError as exc:
        raise _storage_failure(exc) from exc
    return UserResponse.from_entity(user)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: int, payload: UserInput, request: Request):
    repo = _get_repository(request)
    user = _find_or_404(repo, user_id)
    try:
        user = repo.upsert(payload, user)
    except StorageError as exc:
        raise _storage_failure(exc) from exc
    return UserResponse.from_entity(user)


@router.delete("/{user_id}", status_code=204)
def delete_user(user_id: int, request: Request):
    repo = _get_repository(request)
    user = _find_or_404(repo, user_id)
    try:
        repo.delete(user)
    except StorageError as exc:
        raise _storage_failure(exc) from exc
    return Response(status_code=204)
