from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from services.users.api.errors import register_error_handlers
from services.users.api.routes import create_router
from services.users.application.create_user import CreateUserUseCase
from services.users.application.delete_user import DeleteUserUseCase
from services.users.application.get_user import GetUserUseCase
from services.users.application.list_users import ListUsersUseCase
from services.users.application.update_user import UpdateUserUseCase
from services.users.config import UsersConfig, load_config
from services.users.infrastructure.ids import SequentialIdProvider
from services.users.infrastructure.memory_users import InMemoryUserRepository


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level, format="%(asctime)s - %(levelname)s - %(message)s"
    )


def build_app(config: UsersConfig | None = None) -> FastAPI:
    cfg = config or load_config()
    configure_logging(cfg.log_level)
    app = FastAPI(title="ghagent-showcase API")

    if cfg.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=list(cfg.cors_origins),
            allow_methods=["GET", "POST", "PUT", "DELETE"],
            allow_headers=["Content-Type"],
        )

    @app.get("/ping")
    async def ping():
        return {"message": "pong"}

    # One repository per app; state lasts as long as the process.
    user_repository = InMemoryUserRepository()
    user_id_provider = SequentialIdProvider()

    app.include_router(
        create_router(
            ListUsersUseCase(repository=user_repository),
            GetUserUseCase(repository=user_repository),
            CreateUserUseCase(
                repository=user_repository,
                id_provider=user_id_provider,
            ),
            UpdateUserUseCase(repository=user_repository),
            DeleteUserUseCase(repository=user_repository),
            prefix=cfg.api_prefix,
        )
    )
    register_error_handlers(app)

    return app


app = build_app()
