"""
comments.py - Group vote comments by category and format them for display

The formatted block is plain annotated text; it goes through the same
parser and vertical layout as the verse itself.
"""

from typing import Dict, List, Sequence, Tuple

import icu

from .models import UNKNOWN_CATEGORY, UNKNOWN_PEN_NAME, ResultRow, VotingRule
from .results import points_by_label

# Full-width spaces between a comment and its signature line
SIGNATURE_SEPARATOR = "　　　"
SIGNATURE_DASH = "――"

# Labels are Japanese category names, so they sort in Japanese collation order
_COLLATOR = icu.Collator.createInstance(icu.Locale("ja"))


def _label_key(label: str) -> Tuple[bytes, str]:
    # raw text breaks ties the collator considers equal
    return _COLLATOR.getSortKey(label), label


def order_labels(labels: Sequence[str], rules: Sequence[VotingRule]) -> List[str]:
    """Sort labels by rule points descending, then label ascending.

    Labels missing from *rules* count as 0 points.
    """
    points = points_by_label(rules)
    return sorted(labels, key=lambda label: (-points.get(label, 0), _label_key(label)))


def bucket_comments(entry: ResultRow) -> Dict[str, List[Tuple[str, str]]]:
    """Return ``label -> [(voter, comment), ...]`` keeping vote order."""
    buckets: Dict[str, List[Tuple[str, str]]] = {}
    for c in entry.comments:
        label = c.category if c.category is not None else UNKNOWN_CATEGORY
        buckets.setdefault(label, []).append(
            (c.voter if c.voter is not None else UNKNOWN_PEN_NAME, c.comment or ""))
    return buckets


def format_comments(entry: ResultRow, rules: Sequence[VotingRule]) -> str:
    """Render the comments on *entry* as category blocks.

    Each block is a ``【label】`` header followed by one
    ``comment　　　――voter`` line per vote; blocks are separated by a
    single blank line.
    """
    buckets = bucket_comments(entry)
    blocks = []
    for label in order_labels(list(buckets), rules):
        items = buckets[label]
        if not items:
            continue
        lines = [f"【{label}】"]
        lines.extend(f"{comment}{SIGNATURE_SEPARATOR}{SIGNATURE_DASH}{voter}"
                     for voter, comment in items)
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)
