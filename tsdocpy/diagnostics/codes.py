"""Diagnostic codes and messages.

Messages use positional ``{0}`` placeholders filled from the diagnostic's
parameters. A translation layer can key on ``code`` and reformat the same
parameters.
"""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "warning"
    category: str | None = None

    def format(self, *parameters: str) -> str:
        return self.message.format(*parameters)


COMMENT_INHERITDOC_CASING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMMENT_INHERITDOC_CASING",
    message="The @inheritDoc tag should be properly capitalized.",
    hint="Spell the tag `@inheritDoc`, or enable inheritDoc compatibility.",
    category="comment",
)

COMMENT_UNRECOGNIZED_TAG_AS_MODIFIER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMMENT_UNRECOGNIZED_TAG_AS_MODIFIER",
    message="Treating unrecognized tag {0} as a modifier tag.",
    hint="Declare the tag as a block or modifier tag, or escape the `@`.",
    category="comment",
)

COMMENT_UNMATCHED_CLOSING_BRACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMMENT_UNMATCHED_CLOSING_BRACE",
    message="Unmatched closing brace.",
    hint="Escape literal braces as `\\}`.",
    category="comment",
)

COMMENT_UNESCAPED_OPEN_BRACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMMENT_UNESCAPED_OPEN_BRACE",
    message="Encountered an unescaped open brace without an inline tag.",
    hint="Escape literal braces as `\\{`.",
    category="comment",
)

COMMENT_UNKNOWN_INLINE_TAG: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMMENT_UNKNOWN_INLINE_TAG",
    message="Encountered an unknown inline tag {0}.",
    category="comment",
)

COMMENT_OPEN_BRACE_IN_INLINE_TAG: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMMENT_OPEN_BRACE_IN_INLINE_TAG",
    message="Encountered an open brace within an inline tag, this is likely a mistake.",
    category="comment",
)

COMMENT_INLINE_TAG_NOT_CLOSED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMMENT_INLINE_TAG_NOT_CLOSED",
    message="Inline tag is not closed.",
    hint="Close the inline tag with `}`.",
    category="comment",
)

COMMENT_EXAMPLE_LITERAL_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMMENT_EXAMPLE_LITERAL_NAME",
    message=(
        "The first line of an example tag will be taken literally as the example name, "
        "and should only contain text."
    ),
    category="comment",
)

COMMENT_INLINE_INHERITDOC_IN_BLOCK_TAG: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMMENT_INLINE_INHERITDOC_IN_BLOCK_TAG",
    message="An inline @inheritDoc tag should not appear within a block tag in comment at {0}.",
    hint="Move `{@inheritDoc}` into the summary.",
    category="comment",
)

COMMENT_MULTIPLE_REMARKS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMMENT_MULTIPLE_REMARKS",
    message="At most one @remarks tag is expected in a comment, ignoring all but the first in comment at {0}.",
    category="comment",
)

COMMENT_MULTIPLE_RETURNS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMMENT_MULTIPLE_RETURNS",
    message="At most one @returns tag is expected in a comment, ignoring all but the first in comment at {0}.",
    category="comment",
)

COMMENT_MULTIPLE_INHERITDOC: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMMENT_MULTIPLE_INHERITDOC",
    message="At most one @inheritDoc tag is expected in a comment, ignoring all but the first in comment at {0}.",
    category="comment",
)

COMMENT_SUMMARY_OVERWRITTEN_BY_INHERITDOC: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMMENT_SUMMARY_OVERWRITTEN_BY_INHERITDOC",
    message="Content in the summary section will be overwritten by the @inheritDoc tag in comment at {0}.",
    category="comment",
)

COMMENT_REMARKS_OVERWRITTEN_BY_INHERITDOC: Final[DiagnosticSpec] = DiagnosticSpec(
    code="COMMENT_REMARKS_OVERWRITTEN_BY_INHERITDOC",
    message="Content in the @remarks block will be overwritten by the @inheritDoc tag in comment at {0}.",
    category="comment",
)
