#!/usr/bin/env python3
"""Quick perf benchmark for documentation comment parsing."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import re
import statistics
import time

from tqdm import tqdm

from tsdocpy.parser import ParseMode, parse

_BLOCK_COMMENT_RE = re.compile(r"/\*\*(?!/).*?\*/", re.DOTALL)


def _collect_source_files(root: Path) -> list[Path]:
    patterns = ("*.ts", "*.tsx", "*.js", "*.mjs")
    files = sorted(path for pattern in patterns for path in root.rglob(pattern))
    return [path for path in files if path.is_file() and "node_modules" not in path.parts]


def _load_comments(files: list[Path]) -> list[tuple[str, str, int, int]]:
    comments: list[tuple[str, str, int, int]] = []
    for path in files:
        text = path.read_text(encoding="utf-8", errors="replace")
        for match in _BLOCK_COMMENT_RE.finditer(text):
            comments.append((str(path), text, match.start(), match.end()))
    return comments


def _run_once(
    comments: list[tuple[str, str, int, int]],
    *,
    mode: ParseMode,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_tags = 0
    total_diagnostics = 0
    iterator = tqdm(comments, desc=label, unit="comment") if show_progress else comments
    for source_path, text, comment_start, comment_end in iterator:
        parsed = parse(
            text,
            mode=mode,
            source_path=source_path,
            block_comment=True,
            start=comment_start,
            end=comment_end,
        )
        total_tags += len(parsed.comment.block_tags)
        total_diagnostics += len(parsed.diagnostics)
    duration = time.perf_counter() - start
    return duration, total_tags, total_diagnostics


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark documentation comment parsing throughput")
    parser.add_argument("root", type=Path, help="Directory of .ts/.js sources to scan for /** */ comments")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--mode",
        type=ParseMode,
        choices=list(ParseMode),
        default=ParseMode.PERMISSIVE,
        help="Parser mode (default: permissive)",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument("--profile", action="store_true", help="Run cProfile and print top hotspots")
    parser.add_argument("--profile-top", type=int, default=30, help="Number of cProfile rows to print")
    parser.add_argument("--profile-sort", type=str, default="tottime", help="cProfile sort key")
    args = parser.parse_args()

    root: Path = args.root
    if not root.exists() or not root.is_dir():
        raise SystemExit(f"Invalid root: {root}")

    files = _collect_source_files(root)
    comments = _load_comments(files)
    if not comments:
        raise SystemExit(f"No /** */ comments found under {root}")

    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                comments,
                mode=args.mode,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        tags_count = 0
        diagnostics_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, tags_count, diagnostics_count = _run_once(
                comments,
                mode=args.mode,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, tags_count, diagnostics_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, tags_count, diagnostics_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, tags_count, diagnostics_count = _benchmark()

    mean = statistics.mean(timings)
    print(f"Dataset: {root}")
    print(f"Files: {len(files)}")
    print(f"Comments: {len(comments)}")
    print(f"Block tags: {tags_count}")
    print(f"Diagnostics: {diagnostics_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Comments/s (mean): {len(comments) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
