from __future__ import annotations

import asyncio
import logging

from services.console.application.boundary import ErrorBoundary
from services.console.application.view import UserManagementView
from services.console.config import ConsoleConfig, load_config
from services.console.infrastructure.api_client import UserApiClient
from services.console.presentation.render import render_view


async def show_users(config: ConsoleConfig) -> str:
    """Load the user list once and return the rendered screen."""
    boundary = ErrorBoundary()
    async with UserApiClient(
        config.api_base_url, timeout=config.timeout_seconds
    ) as client:
        view = UserManagementView(client)
        await view.mount()
        return boundary.render(lambda: render_view(view.state))


def main() -> None:
    cfg = load_config()
    logging.basicConfig(
        level=cfg.log_level, format="%(asctime)s - %(levelname)s - %(message)s"
    )
    print(asyncio.run(show_users(cfg)))


if __name__ == "__main__":
    main()
