"""Diagnostics core types."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Literal

from tsdocpy.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the comment lexer/parser."""

    code: str
    message: str
    range: TextRange
    severity: Severity = "warning"
    hint: str | None = None
    category: str | None = None
    parameters: tuple[str, ...] = ()
    source_path: str | None = None


DiagnosticSink = Callable[[Diagnostic], None]
