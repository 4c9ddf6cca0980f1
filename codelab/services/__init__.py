"""Services module."""

from .proxy_service import get_execution_proxy, get_tutor_proxy, proxy_lifespan

__all__ = ["get_execution_proxy", "get_tutor_proxy", "proxy_lifespan"]
