"""Lifespan middleware - opens the pool and bootstraps authorization on startup."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

from gdprauthz.application.use_cases.bootstrap.bootstrap_authorization import (
    BootstrapAuthorizationUseCase,
)

logger = logging.getLogger(__name__)


class LifespanMiddleware:
    """Opens the connection pool (if any) and runs bootstrap before serving."""

    def __init__(
        self,
        bootstrap: BootstrapAuthorizationUseCase,
        pool: AsyncConnectionPool | None = None,
    ) -> None:
        self._bootstrap = bootstrap
        self._pool = pool
        self._bootstrapped = False

    async def process_startup(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        """Open pool, then seed and validate. A ConfigurationError aborts startup."""
        if self._pool is not None:
            await self._pool.open()
        if not self._bootstrapped:
            await self._bootstrap.execute()
            self._bootstrapped = True

    async def process_shutdown(self, scope: dict[str, Any], event: dict[str, Any]) -> None:
        """Close pool when ASGI server shuts down."""
        if self._pool is not None:
            await self._pool.close()
            logger.info("Connection pool closed")
