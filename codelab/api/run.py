"""
Code execution API routes.
"""

from fastapi import APIRouter, Depends

from codelab.execution import LANGUAGE_SPECS, ExecutionProxy
from codelab.models.schemas import ErrorResponse, LanguageInfo, RunRequest, RunResponse
from codelab.services import get_execution_proxy

router = APIRouter(tags=["run"])


@router.post(
    "/run",
    response_model=RunResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse}
    },
    summary="Run code",
    description="Execute code on the remote runtime and return its output"
)
async def run_code(
    request: RunRequest,
    proxy: ExecutionProxy = Depends(get_execution_proxy)
) -> RunResponse:
    """
    Execute a program.

    - **language**: `python`, `java` or `csharp`
    - **source_code**: program text
    - **stdin**: standard input for the program

    Unsupported languages and upstream failures are turned into JSON errors
    by the application's exception handlers.
    """
    result = await proxy.execute(
        language=request.language,
        source_code=request.source_code,
        stdin=request.stdin,
    )
    return RunResponse.from_result(result)


@router.get(
    "/languages",
    response_model=list[LanguageInfo],
    summary="List languages",
    description="Languages accepted by /run and their remote runtimes"
)
async def list_languages() -> list[LanguageInfo]:
    return [
        LanguageInfo(
            id=language.value,
            name=spec.display_name,
            runtime=spec.runtime,
            version=spec.version,
        )
        for language, spec in LANGUAGE_SPECS.items()
    ]
