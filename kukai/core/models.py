"""
models.py - Value types shared by the parser, aggregator and formatter

Source-of-truth records (RawSubmission, VoteRecord, VotingRule) are owned by
the external data store; everything else is recomputed per call.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from kukai.utils.text_processing import truncate_comment

# Shown wherever the data store hands us no pen-name
UNKNOWN_PEN_NAME = "（俳号未設定）"
# Bucket label for comments whose vote carries no category
UNKNOWN_CATEGORY = "カテゴリ不明"


@dataclass(frozen=True)
class TextToken:
    """A literal run of text."""
    content: str


@dataclass(frozen=True)
class RubyToken:
    """A base run with a phonetic gloss attached beside it."""
    base: str
    gloss: str


Token = Union[TextToken, RubyToken]


@dataclass(frozen=True)
class ParsedHaiku:
    """A verse split into an optional preface and its body, both tokenised."""
    body: Tuple[Token, ...]
    preface: Optional[Tuple[Token, ...]] = None


@dataclass(frozen=True)
class RawSubmission:
    """A submitted verse. ``author`` stays None until results are published."""
    entry_no: int
    body: str
    author: Optional[str] = None


@dataclass(frozen=True)
class VoteRecord:
    """One pick by one voter in one category.

    Comments over 300 characters are truncated on construction.
    """
    voter: Optional[str]
    entry_no: int
    category: Optional[str]
    comment: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "comment", truncate_comment(self.comment))


@dataclass(frozen=True)
class VotingRule:
    label: str
    points: int
    max_picks: int = 1


@dataclass(frozen=True)
class Comment:
    """A vote comment as it appears on a result row."""
    voter: Optional[str]
    comment: Optional[str]
    category: Optional[str]


@dataclass(frozen=True)
class ResultRow:
    entry_no: int
    body: str
    score: int
    author: Optional[str] = None
    comments: Tuple[Comment, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RankGroup:
    """Rows sharing one score. The group's position in the list is its rank."""
    score: int
    rows: Tuple[ResultRow, ...]
