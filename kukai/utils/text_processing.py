"""
text_processing.py - Text cleanup for user-authored verse and comments

Provides the normalisation applied to snapshot text before it reaches the
parser, plus the truncation and snippet rules used on ballot screens.
"""

import re
import unicodedata
from typing import Optional
from ftfy import fix_text

# Vote comments longer than this are cut, never rejected
MAX_COMMENT_CHARS = 300

# Ballot screens show this many characters of each verse
SNIPPET_CHARS = 30


def clean_user_text(text: str) -> str:
    """Repair mojibake and normalise line endings in user-authored text.

    Character-width folding and quote uncurling are disabled: the annotation
    markers are full-width characters and must survive untouched.

    Args:
        text: Raw text from the data store

    Returns:
        NFC-normalised text with LF line endings
    """
    fixed = fix_text(text, fix_character_width=False, uncurl_quotes=False)
    fixed = fixed.replace("\r\n", "\n").replace("\r", "\n")
    return unicodedata.normalize("NFC", fixed)


def truncate_comment(comment: Optional[str],
                     limit: int = MAX_COMMENT_CHARS) -> Optional[str]:
    """Trim a vote comment and cut it to *limit* characters.

    Args:
        comment: Comment as entered, possibly None
        limit: Maximum number of characters kept

    Returns:
        The trimmed comment, or None when nothing is left
    """
    if comment is None:
        return None
    trimmed = comment.strip()
    if len(trimmed) > limit:
        trimmed = trimmed[:limit]
    return trimmed or None


def entry_snippet(body: str, length: int = SNIPPET_CHARS) -> str:
    """Collapse whitespace runs to single spaces and keep the first *length* chars."""
    return re.sub(r"\s+", " ", body)[:length]
