import pytest

from codelab.tutor import TutorRequest, build_tutor_messages
from codelab.tutor.prompts import display_name


def _user_message(**fields) -> str:
    return build_tutor_messages(TutorRequest(**fields))[1]["content"]


def test_exactly_two_role_tagged_messages() -> None:
    messages = build_tutor_messages(TutorRequest(language="python"))

    assert [m["role"] for m in messages] == ["system", "user"]
    assert all(isinstance(m["content"], str) and m["content"] for m in messages)


def test_system_prompt_rules() -> None:
    system = build_tutor_messages(TutorRequest(language="python"), "Spanish")[0]["content"]

    assert "4-6" in system
    assert "complete program" in system
    assert "compilation or syntax error" in system
    assert "loops, conditions" in system
    assert "1 question" in system
    assert "Answer in Spanish" in system
    assert "Java/C#" in system
    assert "class Main" in system
    assert "class Program" in system


def test_system_prompt_uses_configured_language() -> None:
    system = build_tutor_messages(TutorRequest(), "English")[0]["content"]
    assert "Answer in English" in system


@pytest.mark.parametrize("expected", [None, "", "   ", "\n\t"])
def test_blank_expected_output_selects_free_mode(expected) -> None:
    user = _user_message(language="python", expected_output=expected)

    assert "Free mode: yes" in user
    assert "Exercise mode" not in user
    assert "Expected output" not in user


def test_expected_output_selects_exercise_mode() -> None:
    user = _user_message(language="python", expected_output="8\n")

    assert "Exercise mode: yes" in user
    assert "Expected output:\n8\n" in user
    assert "Free mode" not in user


def test_user_message_sections_in_order() -> None:
    user = _user_message(
        language="java",
        source_code="public class Main {}",
        stdout="out-text",
        stderr="error: class Main not found",
    )

    assert user.startswith("Language: Java\n")
    positions = [
        user.index("Obtained output (stdout):\nout-text"),
        user.index("Errors (stderr):\nerror: class Main not found"),
        user.index("Student code:\n---\npublic class Main {}\n---"),
        user.index("closer to the expected result"),
    ]
    assert positions == sorted(positions)


def test_display_names() -> None:
    assert display_name("python") == "Python"
    assert display_name("csharp") == "C#"
    assert display_name("kotlin") == "kotlin"


def test_prompt_build_is_pure() -> None:
    request = TutorRequest(language="csharp", source_code="x", stdout="y", stderr="z", expected_output="w")
    assert build_tutor_messages(request) == build_tutor_messages(request)
    assert request == TutorRequest(language="csharp", source_code="x", stdout="y", stderr="z", expected_output="w")
