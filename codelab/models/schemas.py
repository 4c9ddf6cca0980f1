"""
Request and response schemas for the Code Lab HTTP API.

Field names follow the front end's JSON: ``source_code`` is snake_case while
``exitCode`` and ``expectedOutput`` are camelCase.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from codelab.execution.models import ExecutionResult
from codelab.tutor.models import TutorRequest


def _none_to_empty(v: Any) -> Any:
    return "" if v is None else v


class RunRequest(BaseModel):
    """Code to execute."""

    language: str = Field(default="", description="Editor language id")
    source_code: str = Field(default="", description="Program source")
    stdin: str = Field(default="", description="Standard input")

    @field_validator("language", "source_code", "stdin", mode="before")
    @classmethod
    def null_is_empty(cls, v: Any) -> Any:
        return _none_to_empty(v)


class RunResponse(BaseModel):
    """Normalized execution output."""

    model_config = ConfigDict(populate_by_name=True)

    stdout: str = ""
    stderr: str = ""
    exit_code: int = Field(default=0, alias="exitCode")

    @classmethod
    def from_result(cls, result: ExecutionResult) -> "RunResponse":
        return cls(stdout=result.stdout, stderr=result.stderr, exit_code=result.exit_code)


class TutorRequestBody(BaseModel):
    """Student context for a hint."""

    model_config = ConfigDict(populate_by_name=True)

    language: str = ""
    source_code: str = ""
    stdout: str = ""
    stderr: str = ""
    expected_output: str | None = Field(default=None, alias="expectedOutput")

    @field_validator("language", "source_code", "stdout", "stderr", mode="before")
    @classmethod
    def null_is_empty(cls, v: Any) -> Any:
        return _none_to_empty(v)

    def to_request(self) -> TutorRequest:
        return TutorRequest(
            language=self.language,
            source_code=self.source_code,
            stdout=self.stdout,
            stderr=self.stderr,
            expected_output=self.expected_output,
        )


class TutorResponse(BaseModel):
    """Hint returned to the student."""

    hint: str


class LanguageInfo(BaseModel):
    """A language the editor can run."""

    id: str
    name: str
    runtime: str
    version: str


class ErrorResponse(BaseModel):
    """Error response."""

    error: str = Field(description="Error message")
    code: str = Field(description="Error code")
    details: Any | None = Field(default=None)
