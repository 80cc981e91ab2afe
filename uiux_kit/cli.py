# uiux_kit/cli.py
"""
Command-line runner for the UI/UX kit recommender.

    uiux-kit SaaS dashboard with React
    uiux-kit --json "fintech landing page"

All words on the command line are joined into one query.  Output is a
section-by-section summary of each populated category (or the composed
kit as JSON with ``--json``).  The process always exits 0: missing data
degrades to empty sections and load failures are reported on stderr.
"""

from __future__ import annotations
import argparse
import json
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from loguru import logger

from uiux_kit.config import CATEGORY_DISPLAY, Category, Record
from uiux_kit.kit import compose_kit
from uiux_kit.knowledge_base import create_knowledge_base
from uiux_kit.record_store import DataCorruptError

USAGE = 'Usage: uiux-kit "your query here"'
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def format_item(item: Record, keys: Sequence[str]) -> str:
    return " | ".join(f"{k}: {item[k]}" for k in keys if k in item)


def render_section(title: str, items: Optional[List[Record]], keys: Sequence[str]) -> List[str]:
    """Lines for one ``[Title]`` block; nothing when ``items`` is empty."""
    if not items:
        return []
    lines = [f"[{title}]"]
    for idx, item in enumerate(items, 1):
        lines.append(f"  {idx}. {format_item(item, keys)}")
    lines.append("")
    return lines


def render_recommendation(query: str, recs: Dict[Category, List[Record]]) -> str:
    lines = ["", "=== UI/UX PRO KIT RECOMMENDATION ===", f"Query: {query}", ""]
    for category in Category:
        title, keys = CATEGORY_DISPLAY[category]
        lines += render_section(title, recs.get(category), keys)
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="uiux-kit", description="Recommend a UI/UX kit for a free-text query.")
    ap.add_argument("query", nargs="*", help="query words, joined with spaces")
    ap.add_argument("--data-dir", dest="data_dir", type=str, default=None, help="directory holding the category CSVs")
    ap.add_argument("--json", dest="as_json", action="store_true", help="print the composed kit as JSON")
    ap.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=LOG_LEVELS,
        default="WARNING",
        help="loguru level for stderr (default WARNING)",
    )
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    # Unrecognised dash-words ("-mode") are query words, not options.
    try:
        args, extra = build_parser().parse_known_args(argv)
    except SystemExit:
        # argparse already printed its message; the runner never exits non-zero
        return 0
    _configure_logging(args.log_level)

    query = " ".join(list(args.query) + extra).strip()
    if not query:
        print(USAGE)
        return 0

    data_dir = Path(args.data_dir) if args.data_dir else None
    try:
        kb = create_knowledge_base(data_dir)
    except DataCorruptError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 0

    recs = kb.smart_recommendation(query)
    if args.as_json:
        print(json.dumps(compose_kit(query, recs).to_dict(), ensure_ascii=False, indent=2))
    else:
        print(render_recommendation(query, recs))
    return 0


if __name__ == "__main__":
    sys.exit(main())
