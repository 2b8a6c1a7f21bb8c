"""
rules.py - Rule-set normalisation, validation and saved presets

These helpers belong to the rule-set editing side. The aggregator and the
comment formatter never call them; they trust whatever rule set they get.
"""

import math
from pathlib import Path
from typing import Any, Dict, Iterable, List

import yaml

from kukai.utils.io_helpers import read_utf8
from kukai.utils.logging_helper import get_logger
from .models import VotingRule

log = get_logger()

MAX_RULES = 10

DEFAULT_RULES = (
    VotingRule(label="特選", points=2, max_picks=1),
    VotingRule(label="入選", points=1, max_picks=2),
)


class RuleSetError(ValueError):
    """Raised when a rule set fails validation."""


def _as_int(value: Any, default: int) -> int:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return int(number)


def normalize_rules(raw: Any) -> List[VotingRule]:
    """Coerce loosely typed rule rows into VotingRules.

    Labels are trimmed and rows with an empty label dropped; points fall back
    to 0 and max_picks to 1 when they are not numbers. Anything that is not a
    list yields an empty rule set.
    """
    if not isinstance(raw, list):
        return []

    rules = []
    for row in raw:
        if not isinstance(row, dict):
            continue
        label = str(row.get("label") or "").strip()
        if not label:
            continue
        rules.append(VotingRule(
            label=label,
            points=_as_int(row.get("points", 0), 0),
            max_picks=_as_int(row.get("max_picks", 1), 1),
        ))
    return rules


def validate_rules(rules: Iterable[VotingRule]) -> List[VotingRule]:
    """Check a rule set before it is saved to a round.

    Raises:
        RuleSetError: on an empty or oversized set, blank, untrimmed or
            duplicate labels, non-integer points, or max_picks below 1
    """
    rules = list(rules)
    if not 1 <= len(rules) <= MAX_RULES:
        raise RuleSetError(f"A rule set needs 1 to {MAX_RULES} rules, got {len(rules)}")

    seen = set()
    for rule in rules:
        if not rule.label or rule.label != rule.label.strip():
            raise RuleSetError(f"Invalid label: {rule.label!r}")
        if rule.label in seen:
            raise RuleSetError(f"Duplicate label: {rule.label}")
        seen.add(rule.label)
        if isinstance(rule.points, bool) or not isinstance(rule.points, int):
            raise RuleSetError(f"Points for {rule.label} must be an integer")
        if isinstance(rule.max_picks, bool) or not isinstance(rule.max_picks, int) or rule.max_picks < 1:
            raise RuleSetError(f"max_picks for {rule.label} must be an integer >= 1")
    return rules


def load_presets(path: Path) -> Dict[str, List[VotingRule]]:
    """Load saved rule presets from a YAML file.

    Expected layout::

        presets:
          - name: 標準
            rules:
              - {label: 特選, points: 2, max_picks: 1}

    A missing file means no presets.
    """
    path = Path(path)
    if not path.exists():
        log.info(f"No preset file at {path}")
        return {}

    data = yaml.safe_load(read_utf8(path)) or {}
    presets: Dict[str, List[VotingRule]] = {}
    for item in data.get("presets", []):
        name = str(item.get("name", "")).strip()
        if not name:
            log.warning(f"Skipping unnamed preset in {path.name}")
            continue
        presets[name] = normalize_rules(item.get("rules"))
    return presets
