"""Static mapping from editor language ids to remote runtimes."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Language(str, Enum):
    """Languages the editor offers."""

    PYTHON = "python"
    JAVA = "java"
    CSHARP = "csharp"


@dataclass(frozen=True)
class LanguageSpec:
    """Runtime coordinates and tutoring metadata for one language."""

    runtime: str
    version: str
    display_name: str
    entry_point: str | None = None


class UnsupportedLanguageError(ValueError):
    """Raised when a language id is not in the runtime table."""

    def __init__(self, language: object) -> None:
        self.language = language
        super().__init__(f"Unsupported language: {language!r}")


LANGUAGE_SPECS: Mapping[Language, LanguageSpec] = MappingProxyType({
    Language.PYTHON: LanguageSpec(
        runtime="python",
        version="3.10.0",
        display_name="Python",
    ),
    Language.JAVA: LanguageSpec(
        runtime="java",
        version="15.0.2",
        display_name="Java",
        entry_point="a class Main with a main method",
    ),
    Language.CSHARP: LanguageSpec(
        runtime="csharp",
        version="6.12.0",
        display_name="C#",
        entry_point="a class Program with a Main method",
    ),
})


def resolve_language(value: object) -> tuple[Language, LanguageSpec]:
    """
    Look up a language id.

    Raises:
        UnsupportedLanguageError: if ``value`` is not a known language id.
    """
    try:
        language = Language(value)
    except ValueError:
        raise UnsupportedLanguageError(value) from None
    return language, LANGUAGE_SPECS[language]
