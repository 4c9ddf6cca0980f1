"""Remote code execution proxy."""

from codelab.execution.executor import ExecutionFailedError, ExecutionProxy
from codelab.execution.languages import (
    LANGUAGE_SPECS,
    Language,
    LanguageSpec,
    UnsupportedLanguageError,
    resolve_language,
)
from codelab.execution.models import ExecutionRequest, ExecutionResult

__all__ = [
    "ExecutionProxy",
    "ExecutionFailedError",
    "ExecutionRequest",
    "ExecutionResult",
    "LANGUAGE_SPECS",
    "Language",
    "LanguageSpec",
    "UnsupportedLanguageError",
    "resolve_language",
]
