"""
results.py - Vote aggregation and tie-aware ranking

This module handles:
- Summing rule points over every vote an entry received
- Ordering entries by score, then entry number
- Folding equal scores into rank groups with dense ranks

Inputs are snapshots from the data store and are trusted as-is: the rule set
is not re-validated here, and nothing in this module raises on odd data.
"""

from typing import Dict, Iterable, Iterator, List, Sequence, Set, Tuple

from kukai.utils.logging_helper import get_logger
from .models import Comment, RankGroup, RawSubmission, ResultRow, VoteRecord, VotingRule

log = get_logger()


def points_by_label(rules: Iterable[VotingRule]) -> Dict[str, int]:
    return {rule.label: rule.points for rule in rules}


def find_unknown_categories(votes: Iterable[VoteRecord],
                            rules: Iterable[VotingRule]) -> List[str]:
    """Return vote categories missing from *rules*, in first-seen order.

    These happen when a rule set is edited after voting; such votes score 0.
    """
    known = points_by_label(rules)
    seen: Set[str] = set()
    unknown = []
    for vote in votes:
        if vote.category not in known and vote.category not in seen:
            seen.add(vote.category)
            unknown.append(vote.category)
    return unknown


def score_entries(entries: Sequence[RawSubmission],
                  votes: Sequence[VoteRecord],
                  rules: Sequence[VotingRule]) -> Dict[int, int]:
    """Map each entry number to the sum of points over all votes it received.

    Repeated picks by the same voter each count. Categories not in *rules*
    contribute 0; votes for unknown entry numbers are dropped.
    """
    points = points_by_label(rules)
    scores = {entry.entry_no: 0 for entry in entries}
    for vote in votes:
        if vote.entry_no not in scores:
            log.warning(f"Ignoring vote by {vote.voter!r} for unknown entry No.{vote.entry_no}")
            continue
        scores[vote.entry_no] += points.get(vote.category, 0)

    unknown = find_unknown_categories(votes, rules)
    if unknown:
        log.debug(f"Categories not in the active rule set scored as 0: {unknown}")
    return scores


def build_result_rows(entries: Sequence[RawSubmission],
                      votes: Sequence[VoteRecord],
                      rules: Sequence[VotingRule]) -> List[ResultRow]:
    """Return one ResultRow per entry, in input order, comments in vote order."""
    scores = score_entries(entries, votes, rules)
    comments: Dict[int, List[Comment]] = {no: [] for no in scores}
    for vote in votes:
        if vote.entry_no in comments:
            comments[vote.entry_no].append(
                Comment(voter=vote.voter, comment=vote.comment, category=vote.category))

    return [
        ResultRow(
            entry_no=entry.entry_no,
            body=entry.body,
            score=scores[entry.entry_no],
            author=entry.author,
            comments=tuple(comments[entry.entry_no]),
        )
        for entry in entries
    ]


def group_by_score(rows: Iterable[ResultRow]) -> List[RankGroup]:
    """Sort by (score desc, entry_no asc) and fold equal scores into groups."""
    ordered = sorted(rows, key=lambda r: (-r.score, r.entry_no))

    groups: List[RankGroup] = []
    for row in ordered:
        if groups and groups[-1].score == row.score:
            last = groups[-1]
            groups[-1] = RankGroup(score=last.score, rows=last.rows + (row,))
        else:
            groups.append(RankGroup(score=row.score, rows=(row,)))
    return groups


def aggregate(entries: Sequence[RawSubmission],
              votes: Sequence[VoteRecord],
              rules: Sequence[VotingRule]) -> List[RankGroup]:
    """
    Score every entry and return rank groups, best first.

    Args:
        entries: Submitted verses of one round
        votes: Every vote record of the round
        rules: Active rule set (label -> points)

    Returns:
        Rank groups ordered by score descending; the Nth group holds rank N
    """
    groups = group_by_score(build_result_rows(entries, votes, rules))
    log.debug(f"Aggregated {len(entries)} entries and {len(votes)} votes into {len(groups)} groups")
    return groups


def ranked(groups: Sequence[RankGroup]) -> Iterator[Tuple[int, RankGroup]]:
    """Yield ``(rank, group)`` with dense ranks starting at 1."""
    return enumerate(groups, start=1)
