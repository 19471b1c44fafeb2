"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from tsdocpy.diagnostics.diagnostic import Diagnostic
from tsdocpy.text import LineIndex


def collect_diagnostics(*groups: Iterable[Diagnostic]) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for group in groups:
        diagnostics.extend(group)
    return diagnostics


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def has_warnings(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "warning" for d in diagnostics)


def format_diagnostic(diagnostic: Diagnostic, line_index: LineIndex | None = None) -> str:
    """Render a diagnostic as ``path:line:col severity CODE message``."""
    path = diagnostic.source_path or "<memory>"
    if line_index is None:
        location = f"{path}@{diagnostic.range.start.value}"
    else:
        position = line_index.line_col(diagnostic.range.start)
        location = f"{path}:{position.line + 1}:{position.column + 1}"
    return f"{location} {diagnostic.severity} {diagnostic.code} {diagnostic.message}"
