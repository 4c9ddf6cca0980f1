"""
Prompt construction for the AI tutor.

``build_tutor_messages`` is pure: it only formats the student's context into
the two chat messages sent to the model.
"""

from codelab.execution.languages import LANGUAGE_SPECS, Language
from codelab.tutor.models import TutorRequest

TUTOR_SYSTEM_PROMPT = """You are a programming tutor. Your task is to give pedagogical, progressive HINTS. \
Do NOT give the complete solution and do not paste the final code. \
Be clear, brief and focused on helping the student learn.

Rules:
- Do not hand over the complete program.
- Give at most 4-6 concrete hints.
- If there is a compilation or syntax error, prioritize it.
- If the result is incorrect, guide with checks (inputs/outputs, types, loops, conditions).
- Finish with 1 question that makes the student reflect.
- Answer in {response_language}.
{entry_point_rule}"""

TUTOR_CLOSING_INSTRUCTION = (
    "Generate hints so the student can fix their code and/or get closer to the expected result."
)


def _entry_point_rule() -> str:
    reminders = [
        f"{spec.display_name}: {spec.entry_point}"
        for spec in LANGUAGE_SPECS.values()
        if spec.entry_point
    ]
    names = "/".join(spec.display_name for spec in LANGUAGE_SPECS.values() if spec.entry_point)
    return f"- If it is {names}, remind the minimal structure ({'; '.join(reminders)}).\n"


def display_name(language: str) -> str:
    """Human name for a language id; unknown ids are shown as given."""
    try:
        return LANGUAGE_SPECS[Language(language)].display_name
    except ValueError:
        return str(language)


def build_system_prompt(response_language: str) -> str:
    return TUTOR_SYSTEM_PROMPT.format(
        response_language=response_language,
        entry_point_rule=_entry_point_rule(),
    )


def build_user_prompt(request: TutorRequest) -> str:
    parts = [f"Language: {display_name(request.language)}\n"]

    if request.is_exercise:
        parts.append(f"Exercise mode: yes\nExpected output:\n{request.expected_output}\n\n")
    else:
        parts.append("Free mode: yes\n\n")

    parts.append(f"Obtained output (stdout):\n{request.stdout or ''}\n\n")
    parts.append(f"Errors (stderr):\n{request.stderr or ''}\n\n")
    parts.append(f"Student code:\n---\n{request.source_code or ''}\n---\n\n")
    parts.append(TUTOR_CLOSING_INSTRUCTION)

    return "".join(parts)


def build_tutor_messages(
    request: TutorRequest,
    response_language: str = "Spanish",
) -> list[dict[str, str]]:
    """Return the ``system`` and ``user`` messages for a hint request."""
    return [
        {"role": "system", "content": build_system_prompt(response_language)},
        {"role": "user", "content": build_user_prompt(request)},
    ]
