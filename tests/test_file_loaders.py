import json

import pytest

from kukai.core.file_loaders import load_snapshot
from kukai.core.models import RawSubmission, VoteRecord, VotingRule

SNAPSHOT = {
    "title": "冬の句会",
    "voting_rules": [{"label": "特選", "points": 2, "max_picks": 1}],
    "entries": [
        {"entry_no": 2, "body": "（（寒し））｜遠山（とおやま）に日は入る\r\n", "author": "枯野"},
        {"entry_no": None, "body": "番号なし"},
        {"entry_no": 2, "body": "重複"},
        {"entry_no": 1, "body": "古池や", "author": None},
    ],
    "votes": [
        {"voter": "A", "entry_no": 2, "category": "特選", "comment": "い" * 320},
        {"voter": None, "entry_no": 1, "category": "入選", "comment": None},
        {"voter": "B", "category": "特選"},
    ],
}


def write_snapshot(path, data):
    # exporters sometimes add a BOM
    path.write_bytes(b"\xef\xbb\xbf" + json.dumps(data, ensure_ascii=False).encode("utf-8"))
    return path


def test_load_snapshot(tmp_path):
    snap = load_snapshot(write_snapshot(tmp_path / "round.json", SNAPSHOT))
    assert snap.title == "冬の句会"
    assert snap.rules == [VotingRule("特選", 2, 1)]
    assert snap.entries == [
        RawSubmission(2, "（（寒し））｜遠山（とおやま）に日は入る\n", "枯野"),
        RawSubmission(1, "古池や", None),
    ]
    assert len(snap.votes) == 2
    assert snap.votes[0].comment == "い" * 300
    assert snap.votes[1] == VoteRecord(None, 1, "入選", None)


def test_title_defaults_to_file_stem(tmp_path):
    snap = load_snapshot(write_snapshot(tmp_path / "spring.json", {"entries": []}))
    assert snap.title == "spring"
    assert snap.entries == [] and snap.votes == [] and snap.rules == []


def test_missing_snapshot(tmp_path):
    with pytest.raises(ValueError):
        load_snapshot(tmp_path / "missing.json")


def test_snapshot_must_be_object(tmp_path):
    with pytest.raises(ValueError):
        load_snapshot(write_snapshot(tmp_path / "list.json", []))


def test_bad_rows_are_skipped(tmp_path):
    data = {
        "entries": [
            "not a row",
            {"entry_no": "abc", "body": "番号が文字"},
            {"entry_no": True, "body": "真偽値"},
            {"entry_no": "3", "body": "文字列の番号"},
        ],
        "votes": [
            42,
            {"voter": "A", "entry_no": "x", "category": "特選"},
            {"voter": "B", "entry_no": 3, "category": "特選"},
        ],
    }
    snap = load_snapshot(write_snapshot(tmp_path / "messy.json", data))
    assert snap.entries == [RawSubmission(3, "文字列の番号", None)]
    assert snap.votes == [VoteRecord("B", 3, "特選")]


def test_sections_that_are_not_lists_are_ignored(tmp_path):
    data = {"entries": {"entry_no": 1, "body": "古池や"}, "votes": {"voter": "A"}}
    snap = load_snapshot(write_snapshot(tmp_path / "objects.json", data))
    assert snap.entries == [] and snap.votes == []
