"""
Remote code execution proxy.

Resolves the editor language, forwards the code to a Piston-compatible
``/execute`` endpoint and normalizes the answer. Nothing runs locally.
"""

from __future__ import annotations

from typing import Any

import httpx
from structlog import get_logger

from codelab.config import ExecutionConfig
from codelab.execution.languages import LanguageSpec, resolve_language
from codelab.execution.models import ExecutionRequest, ExecutionResult

logger = get_logger()


class ExecutionFailedError(RuntimeError):
    """The upstream call or its JSON decoding failed."""


class ExecutionProxy:
    """
    Facade over the remote execution service.

    Usage::

        proxy = ExecutionProxy(settings.execution)
        result = await proxy.execute("python", "print(1 + 1)")
        await proxy.shutdown()
    """

    def __init__(
        self,
        config: ExecutionConfig,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config
        self._client = client or httpx.AsyncClient()

    async def shutdown(self) -> None:
        """Release the HTTP client."""
        await self._client.aclose()
        logger.info("ExecutionProxy shut down")

    def build_payload(self, spec: LanguageSpec, request: ExecutionRequest) -> dict[str, Any]:
        """Upstream body: one source file with a fixed name, plus stdin."""
        return {
            "language": spec.runtime,
            "version": spec.version,
            "files": [
                {"name": self._config.source_filename, "content": request.source_code or ""}
            ],
            "stdin": request.stdin or "",
        }

    async def execute(
        self,
        language: str,
        source_code: str | None = "",
        stdin: str | None = "",
    ) -> ExecutionResult:
        """
        Run code on the remote service.

        Args:
            language: Editor language id (``python``, ``java``, ``csharp``).
            source_code: Program text; ``None`` is treated as empty.
            stdin: Standard input fed to the program; ``None`` is treated as empty.

        Returns:
            ``ExecutionResult`` with stdout, stderr and exit code.

        Raises:
            UnsupportedLanguageError: before any outbound call for unknown ids.
            ExecutionFailedError: when the upstream call or decoding fails.
        """
        request = ExecutionRequest(
            language=language,
            source_code=source_code or "",
            stdin=stdin or "",
        )
        lang, spec = resolve_language(request.language)
        payload = self.build_payload(spec, request)

        try:
            response = await self._client.post(self._config.url, json=payload)
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Execution request failed", language=lang.value, error=str(e))
            raise ExecutionFailedError(str(e)) from e

        if response.is_error:
            logger.warning(
                "Execution service returned an error status",
                language=lang.value,
                status_code=response.status_code,
            )

        result = ExecutionResult.from_upstream(data)

        logger.info(
            "Code execution finished",
            language=lang.value,
            runtime=f"{spec.runtime}-{spec.version}",
            exit_code=result.exit_code,
        )

        return result
