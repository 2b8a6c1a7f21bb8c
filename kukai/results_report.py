#!/usr/bin/env python
"""
results_report.py – rank a round from a data-store snapshot.

Quick examples
--------------

# 1) Print the ranking table
python -m kukai.results_report --snapshot data/snapshots/spring.json

# 2) Also write the vertical HTML results page
python -m kukai.results_report --snapshot data/snapshots/spring.json --html

# 3) Score with a saved rule preset instead of the snapshot's rules
python -m kukai.results_report --snapshot data/snapshots/spring.json --preset 標準
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from kukai.core.comments import format_comments
from kukai.core.file_loaders import load_snapshot
from kukai.core.html_generation import generate_results_html
from kukai.core.models import UNKNOWN_PEN_NAME
from kukai.core.results import aggregate, find_unknown_categories, ranked
from kukai.core.rules import load_presets
from kukai.utils.io_helpers import ensure_utf8_windows, write_utf8
from kukai.utils.logging_helper import get_logger
from kukai.utils.paths import PRESETS_FILE, default_report_path
from kukai.utils.text_processing import entry_snippet


console = Console()
log = get_logger()


def build_table(title: str, groups) -> Table:
    table = Table(title=f"結果発表：{title}")
    table.add_column("順位", justify="right")
    table.add_column("点", justify="right")
    table.add_column("No.", justify="right")
    table.add_column("句")
    table.add_column("作者")
    for rank, group in ranked(groups):
        for row in group.rows:
            table.add_row(str(rank), str(group.score), str(row.entry_no),
                          entry_snippet(row.body), row.author or UNKNOWN_PEN_NAME)
    return table


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Rank a round from a snapshot file")
    ap.add_argument("--snapshot", required=True, type=Path,
                    help="JSON snapshot exported from the data store")
    ap.add_argument("--html", action="store_true",
                    help="write the vertical HTML results page")
    ap.add_argument("--out", type=Path, help="HTML output path")
    ap.add_argument("--preset", help="score with this saved rule preset")
    ap.add_argument("--presets-file", type=Path, default=PRESETS_FILE)
    ap.add_argument("--comments", action="store_true",
                    help="print each entry's grouped comments")
    args = ap.parse_args(argv)

    ensure_utf8_windows()

    try:
        snapshot = load_snapshot(args.snapshot)
    except (ValueError, OSError) as e:
        console.print(f"[red]✗ {e}[/]")
        return 1

    rules = snapshot.rules
    if args.preset:
        presets = load_presets(args.presets_file)
        if args.preset not in presets:
            console.print(f"[red]✗ Unknown preset: {args.preset}[/]")
            return 1
        rules = presets[args.preset]
        log.info(f"Using preset {args.preset!r} ({len(rules)} rules)")

    unknown = find_unknown_categories(snapshot.votes, rules)
    if unknown:
        console.print(f"[yellow]⚠ Votes in categories outside the rule set score 0: "
                      f"{', '.join(str(u) for u in unknown)}[/]")

    groups = aggregate(snapshot.entries, snapshot.votes, rules)
    console.print(build_table(snapshot.title, groups))

    if args.comments:
        for _, group in ranked(groups):
            for row in group.rows:
                text = format_comments(row, rules)
                if text:
                    console.print(f"\n[bold]No.{row.entry_no}[/]")
                    console.print(text, markup=False)

    if args.html:
        out_path = args.out or default_report_path(args.snapshot)
        write_utf8(out_path, generate_results_html(snapshot.title, groups, rules))
        console.print(f"[green]✓ Wrote {out_path}[/]")

    return 0


if __name__ == "__main__":
    sys.exit(main())
