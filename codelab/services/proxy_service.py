"""
Proxy service for dependency injection and lifecycle management.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from structlog import get_logger

from codelab.config import get_settings
from codelab.execution import ExecutionProxy
from codelab.tutor import TutorProxy

logger = get_logger()

# Global proxy instances
_execution_proxy: ExecutionProxy | None = None
_tutor_proxy: TutorProxy | None = None


async def get_execution_proxy() -> ExecutionProxy:
    """Get the execution proxy for dependency injection."""
    if _execution_proxy is None:
        raise RuntimeError("Execution proxy not initialized. Use proxy_lifespan.")
    return _execution_proxy


async def get_tutor_proxy() -> TutorProxy:
    """Get the tutor proxy for dependency injection."""
    if _tutor_proxy is None:
        raise RuntimeError("Tutor proxy not initialized. Use proxy_lifespan.")
    return _tutor_proxy


@asynccontextmanager
async def proxy_lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the proxies from settings and close their clients on shutdown."""
    global _execution_proxy, _tutor_proxy

    settings = get_settings()

    _execution_proxy = ExecutionProxy(settings.execution)
    _tutor_proxy = TutorProxy(settings.tutor)

    logger.info(
        "Proxies initialized",
        execution_url=settings.execution.url,
        tutor_model=settings.tutor.model,
        tutor_configured=settings.tutor.has_credential,
    )
    if not settings.tutor.has_credential:
        logger.warning("GROQ_API_KEY missing; /tutor will answer with setup instructions")

    yield

    logger.info("Shutting down proxies...")
    await _execution_proxy.shutdown()
    await _tutor_proxy.shutdown()
    _execution_proxy = None
    _tutor_proxy = None
