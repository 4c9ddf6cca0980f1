"""AI tutor proxy."""

from codelab.tutor.models import (
    TutorError,
    TutorErrorKind,
    TutorOutcome,
    TutorRequest,
    TutorResult,
)
from codelab.tutor.prompts import build_tutor_messages
from codelab.tutor.service import FALLBACK_HINT, TutorProxy

__all__ = [
    "FALLBACK_HINT",
    "TutorError",
    "TutorErrorKind",
    "TutorOutcome",
    "TutorProxy",
    "TutorRequest",
    "TutorResult",
    "build_tutor_messages",
]
