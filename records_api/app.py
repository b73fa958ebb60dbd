"""FastAPI application exposing the stored user records."""
from __future__ import annotations

import logging

from fastapi import FastAPI

from records_api.core.config import Settings, get_settings
from records_api.core.logging_config import configure_logging
from records_api.repositories.json_user_repository import JsonUserRepository
from records_api.routers import users as users_router

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory compatible with `uvicorn records_api.app:create_app --factory`.

    Builds one repository for the lifetime of the app and shares it through
    `app.state.user_repository`.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    storage_path = settings.resolved_storage_path
    storage_path.parent.mkdir(parents=True, exist_ok=True)

    app = FastAPI(title="User Records API")
    app.state.settings = settings
    app.state.user_repository = JsonUserRepository(storage_path)
    app.include_router(users_router.router)

    @app.get("/health")
    def health():
        return {"status": "ok", "users": app.state.user_repository.count()}

    logger.info("User records API ready (env=%s, storage=%s)", settings.app_env, storage_path)
    return app
