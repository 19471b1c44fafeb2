"""Diagnostics."""

from tsdocpy.diagnostics.codes import (
    COMMENT_EXAMPLE_LITERAL_NAME,
    COMMENT_INHERITDOC_CASING,
    COMMENT_INLINE_INHERITDOC_IN_BLOCK_TAG,
    COMMENT_INLINE_TAG_NOT_CLOSED,
    COMMENT_MULTIPLE_INHERITDOC,
    COMMENT_MULTIPLE_REMARKS,
    COMMENT_MULTIPLE_RETURNS,
    COMMENT_OPEN_BRACE_IN_INLINE_TAG,
    COMMENT_REMARKS_OVERWRITTEN_BY_INHERITDOC,
    COMMENT_SUMMARY_OVERWRITTEN_BY_INHERITDOC,
    COMMENT_UNESCAPED_OPEN_BRACE,
    COMMENT_UNKNOWN_INLINE_TAG,
    COMMENT_UNMATCHED_CLOSING_BRACE,
    COMMENT_UNRECOGNIZED_TAG_AS_MODIFIER,
    DiagnosticSpec,
)
from tsdocpy.diagnostics.diagnostic import Diagnostic, DiagnosticSink, Severity
from tsdocpy.diagnostics.report import (
    collect_diagnostics,
    format_diagnostic,
    has_errors,
    has_warnings,
)

__all__ = [
    "COMMENT_EXAMPLE_LITERAL_NAME",
    "COMMENT_INHERITDOC_CASING",
    "COMMENT_INLINE_INHERITDOC_IN_BLOCK_TAG",
    "COMMENT_INLINE_TAG_NOT_CLOSED",
    "COMMENT_MULTIPLE_INHERITDOC",
    "COMMENT_MULTIPLE_REMARKS",
    "COMMENT_MULTIPLE_RETURNS",
    "COMMENT_OPEN_BRACE_IN_INLINE_TAG",
    "COMMENT_REMARKS_OVERWRITTEN_BY_INHERITDOC",
    "COMMENT_SUMMARY_OVERWRITTEN_BY_INHERITDOC",
    "COMMENT_UNESCAPED_OPEN_BRACE",
    "COMMENT_UNKNOWN_INLINE_TAG",
    "COMMENT_UNMATCHED_CLOSING_BRACE",
    "COMMENT_UNRECOGNIZED_TAG_AS_MODIFIER",
    "Diagnostic",
    "DiagnosticSink",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "format_diagnostic",
    "has_errors",
    "has_warnings",
]
