"""Data models for the remote execution proxy."""

from dataclasses import dataclass
from typing import Any


@dataclass
class ExecutionRequest:
    """Code and input to run on the remote service."""

    language: str
    source_code: str = ""
    stdin: str = ""


@dataclass
class ExecutionResult:
    """Normalized outcome of a remote execution."""

    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0

    @classmethod
    def from_stage(cls, stage: Any) -> "ExecutionResult":
        """Build a result from a Piston stage object, tolerating missing or mistyped fields."""
        if not isinstance(stage, dict):
            return cls()
        stdout = stage.get("stdout")
        stderr = stage.get("stderr")
        code = stage.get("code")
        return cls(
            stdout=stdout if isinstance(stdout, str) else "",
            stderr=stderr if isinstance(stderr, str) else "",
            # bool is an int subclass but never a valid exit code
            exit_code=code if isinstance(code, int) and not isinstance(code, bool) else 0,
        )

    @classmethod
    def from_upstream(cls, payload: Any) -> "ExecutionResult":
        """
        Normalize a Piston ``/execute`` response.

        A ``compile`` stage that exited non-zero wins over ``run`` so
        compiler diagnostics are not lost; otherwise the ``run`` stage is
        used. Anything missing falls back to empty output and exit code 0.
        """
        if not isinstance(payload, dict):
            return cls()

        compiled = cls.from_stage(payload.get("compile"))
        if compiled.exit_code != 0:
            return compiled

        return cls.from_stage(payload.get("run"))
