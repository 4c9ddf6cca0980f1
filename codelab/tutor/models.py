"""Data models for the AI tutor proxy."""

from dataclasses import dataclass
from enum import Enum


class TutorErrorKind(str, Enum):
    """Why a hint could not be produced."""

    MISSING_CREDENTIAL = "missing_credential"
    PROMPT_FAILED = "prompt_failed"
    UPSTREAM_FAILED = "upstream_failed"
    INVALID_REQUEST = "invalid_request"


@dataclass
class TutorRequest:
    """Student context sent to the tutor."""

    language: str = ""
    source_code: str = ""
    stdout: str = ""
    stderr: str = ""
    expected_output: str | None = None

    @property
    def is_exercise(self) -> bool:
        """Exercise mode is on when a non-blank expected output is given."""
        return isinstance(self.expected_output, str) and bool(self.expected_output.strip())


@dataclass
class TutorResult:
    """A hint for the student."""

    hint: str


@dataclass
class TutorError:
    """Failure half of a tutor outcome; converted to a hint at the HTTP boundary."""

    kind: TutorErrorKind
    message: str


TutorOutcome = TutorResult | TutorError
