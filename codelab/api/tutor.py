"""
AI tutor API routes.

This module is the single place where tutor failures become hints: every
``TutorError`` is answered with a 200 response so the editor never breaks
because of the tutor.
"""

from fastapi import APIRouter, Depends

from codelab.models.schemas import TutorRequestBody, TutorResponse
from codelab.tutor import TutorError, TutorErrorKind, TutorOutcome, TutorProxy
from codelab.services import get_tutor_proxy

router = APIRouter(tags=["tutor"])

MISSING_CREDENTIAL_HINT = (
    "The AI tutor is not configured: GROQ_API_KEY is missing in the backend.\n"
    "Add GROQ_API_KEY=... to the backend environment (or its .env file) "
    "and restart the server."
)


def hint_for_error(error: TutorError) -> str:
    """User-facing hint for a failed tutor request."""
    if error.kind == TutorErrorKind.MISSING_CREDENTIAL:
        return MISSING_CREDENTIAL_HINT
    return (
        "I could not generate a hint right now.\n"
        f"Technical detail: {error.message or 'unknown'}"
    )


def to_tutor_response(outcome: TutorOutcome) -> TutorResponse:
    if isinstance(outcome, TutorError):
        return TutorResponse(hint=hint_for_error(outcome))
    return TutorResponse(hint=outcome.hint)


@router.post(
    "/tutor",
    response_model=TutorResponse,
    summary="Ask the tutor",
    description="Get pedagogical hints for the student's code"
)
async def ask_tutor(
    request: TutorRequestBody,
    proxy: TutorProxy = Depends(get_tutor_proxy)
) -> TutorResponse:
    """
    Ask for hints about the current code.

    - **expectedOutput**: when non-blank, the tutor guides toward it (exercise mode)
    """
    outcome = await proxy.request_hint(request.to_request())
    return to_tutor_response(outcome)
