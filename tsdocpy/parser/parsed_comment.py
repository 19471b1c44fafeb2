"""Parser output carrier."""

from dataclasses import dataclass

from tsdocpy.diagnostics import Diagnostic
from tsdocpy.model import Comment


@dataclass(frozen=True, slots=True)
class ParsedComment:
    comment: Comment
    diagnostics: list[Diagnostic]
