"""Parse many comments, optionally on a thread pool."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
import logging

from tqdm import tqdm

from tsdocpy.parser.options import CommentParserConfig, ParseMode
from tsdocpy.parser.tsdoc import parse_result, resolve_config
from tsdocpy.pipeline.result import CommentParseResult

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommentSource:
    """One comment to parse, with the file it came from."""

    text: str
    source_path: str | None = None
    block_comment: bool = False


def parse_comments(
    sources: Iterable[CommentSource | str],
    config: CommentParserConfig | None = None,
    *,
    mode: ParseMode | None = None,
    max_workers: int | None = None,
    show_progress: bool = False,
) -> list[CommentParseResult]:
    """Parse comments independently; results keep the input order.

    Each result carries its own diagnostics. ``max_workers`` > 1 shards the
    work over a ``ThreadPoolExecutor``; the configuration is shared read-only.
    """
    resolved_config = resolve_config(config=config, mode=mode)
    items: Sequence[CommentSource] = [
        item if isinstance(item, CommentSource) else CommentSource(text=item) for item in sources
    ]

    def _parse_one(item: CommentSource) -> CommentParseResult:
        return parse_result(
            item.text,
            resolved_config,
            source_path=item.source_path,
            block_comment=item.block_comment,
        )

    if max_workers is not None and max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            mapped = executor.map(_parse_one, items)
            results = list(tqdm(mapped, total=len(items), desc="comments", unit="comment", disable=not show_progress))
    else:
        results = [
            _parse_one(item)
            for item in tqdm(items, desc="comments", unit="comment", disable=not show_progress)
        ]

    LOGGER.info(
        "Parsed %d comments (%d diagnostics)",
        len(results),
        sum(len(result.diagnostics) for result in results),
    )
    return results
