import pytest

from kukai.core.models import VotingRule
from kukai.core.rules import DEFAULT_RULES, RuleSetError, load_presets, normalize_rules, validate_rules


def test_normalize_rules_coerces_rows():
    raw = [
        {"label": "  特選 ", "points": "2", "max_picks": 1},
        {"label": "", "points": 5},
        {"label": "入選", "points": "abc", "max_picks": None},
        {"label": "佳作", "points": float("inf")},
        "not a row",
    ]
    assert normalize_rules(raw) == [
        VotingRule("特選", 2, 1),
        VotingRule("入選", 0, 1),
        VotingRule("佳作", 0, 1),
    ]


def test_normalize_rules_rejects_non_list():
    assert normalize_rules(None) == []
    assert normalize_rules({"label": "特選"}) == []


def test_default_rules_are_valid():
    assert validate_rules(DEFAULT_RULES) == list(DEFAULT_RULES)


@pytest.mark.parametrize("rules", [
    [],
    [VotingRule(f"選{i}", 1) for i in range(11)],
    [VotingRule("特選", 2), VotingRule("特選", 1)],
    [VotingRule(" 特選", 2)],
    [VotingRule("", 2)],
    [VotingRule("特選", 2, 0)],
    [VotingRule("特選", 1.5)],
])
def test_validate_rules_rejects(rules):
    with pytest.raises(RuleSetError):
        validate_rules(rules)


def test_load_presets(tmp_path):
    path = tmp_path / "presets.yaml"
    path.write_text(
        "presets:\n"
        "  - name: 標準\n"
        "    rules:\n"
        "      - {label: 特選, points: 2, max_picks: 1}\n"
        "      - {label: 入選, points: 1, max_picks: 2}\n"
        "  - name: ''\n"
        "    rules: []\n",
        encoding="utf-8",
    )
    assert load_presets(path) == {"標準": list(DEFAULT_RULES)}


def test_missing_preset_file(tmp_path):
    assert load_presets(tmp_path / "nope.yaml") == {}
