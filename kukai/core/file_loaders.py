"""
file_loaders.py - Load a round snapshot exported from the data store

This module handles:
- Reading the JSON snapshot (BOM-safe)
- Turning entry, vote and rule rows into model objects
- Cleaning user-authored text before it reaches the parser
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, List, Optional

from kukai.utils.io_helpers import read_utf8
from kukai.utils.logging_helper import get_logger
from kukai.utils.text_processing import MAX_COMMENT_CHARS, clean_user_text, entry_snippet
from .models import RawSubmission, VoteRecord, VotingRule
from .rules import normalize_rules

log = get_logger()


@dataclass(frozen=True)
class Snapshot:
    title: str
    entries: List[RawSubmission]
    votes: List[VoteRecord]
    rules: List[VotingRule]


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    return clean_user_text(str(value))


def _object_rows(rows: Any, section: str) -> List[dict]:
    """Return the dict rows of a snapshot section; anything else is skipped."""
    if not isinstance(rows, list):
        log.warning(f"Section {section!r} is not a list, ignoring it")
        return []
    kept = [row for row in rows if isinstance(row, dict)]
    if len(kept) != len(rows):
        log.warning(f"Skipping {len(rows) - len(kept)} non-object rows in {section!r}")
    return kept


def _entry_no(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def entries_from_rows(rows: Any) -> List[RawSubmission]:
    """Build submissions from entry rows; rows without a usable number are skipped."""
    entries = []
    seen = set()
    for row in _object_rows(rows, "entries"):
        no = _entry_no(row.get("entry_no"))
        if no is None:
            log.warning(f"Skipping entry without a usable number ({row.get('entry_no')!r}): "
                        f"{entry_snippet(str(row.get('body') or ''))!r}")
            continue
        if no in seen:
            log.warning(f"Duplicate entry No.{no}, keeping the first")
            continue
        seen.add(no)
        entries.append(RawSubmission(
            entry_no=no,
            body=clean_user_text(str(row.get("body") or "")),
            author=_clean(row.get("author")),
        ))
    return entries


def votes_from_rows(rows: Any) -> List[VoteRecord]:
    votes = []
    for row in _object_rows(rows, "votes"):
        no = _entry_no(row.get("entry_no"))
        if no is None:
            log.warning(f"Skipping vote by {row.get('voter')!r} without a usable entry number "
                        f"({row.get('entry_no')!r})")
            continue
        comment = _clean(row.get("comment"))
        if comment is not None and len(comment.strip()) > MAX_COMMENT_CHARS:
            log.info(f"Truncating comment by {row.get('voter')!r} on No.{no}")
        votes.append(VoteRecord(
            voter=_clean(row.get("voter")),
            entry_no=no,
            category=_clean(row.get("category")),
            comment=comment,
        ))
    return votes


def rules_from_rows(rows: Any) -> List[VotingRule]:
    return normalize_rules(rows)


def load_snapshot(path: Path) -> Snapshot:
    """Read a snapshot file written by the data-store export.

    Raises:
        ValueError: if the file is missing or is not a JSON object
    """
    path = Path(path)
    if not path.exists():
        raise ValueError(f"Snapshot not found: {path}")

    data = json.loads(read_utf8(path))
    if not isinstance(data, dict):
        raise ValueError(f"Snapshot {path.name} must be a JSON object")

    snapshot = Snapshot(
        title=_clean(data.get("title")) or path.stem,
        entries=entries_from_rows(data.get("entries") or []),
        votes=votes_from_rows(data.get("votes") or []),
        rules=rules_from_rows(data.get("voting_rules") or []),
    )
    log.info(f"Loaded {path.name}: {len(snapshot.entries)} entries, "
             f"{len(snapshot.votes)} votes, {len(snapshot.rules)} rules")
    return snapshot
