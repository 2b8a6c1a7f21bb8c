import json

from kukai import results_report

SNAPSHOT = {
    "title": "冬の句会",
    "voting_rules": [{"label": "特選", "points": 2, "max_picks": 1},
                     {"label": "入選", "points": 1, "max_picks": 2}],
    "entries": [{"entry_no": 1, "body": "古池や", "author": "芭蕉"},
                {"entry_no": 2, "body": "遠山に", "author": "枯野"}],
    "votes": [{"voter": "A", "entry_no": 2, "category": "特選", "comment": "よい"}],
}


def test_main_writes_html(tmp_path):
    snap = tmp_path / "round.json"
    snap.write_text(json.dumps(SNAPSHOT, ensure_ascii=False), encoding="utf-8")
    out = tmp_path / "out" / "results.html"
    assert results_report.main(["--snapshot", str(snap), "--html", "--out", str(out), "--comments"]) == 0
    assert "第1位（合計 2 点）" in out.read_text(encoding="utf-8")


def test_main_with_preset(tmp_path):
    snap = tmp_path / "round.json"
    snap.write_text(json.dumps(SNAPSHOT, ensure_ascii=False), encoding="utf-8")
    presets = tmp_path / "presets.yaml"
    presets.write_text("presets:\n  - name: 逆\n    rules:\n      - {label: 特選, points: -1}\n",
                       encoding="utf-8")
    args = ["--snapshot", str(snap), "--presets-file", str(presets)]
    assert results_report.main(args + ["--preset", "逆"]) == 0
    assert results_report.main(args + ["--preset", "none"]) == 1


def test_main_missing_snapshot(tmp_path):
    assert results_report.main(["--snapshot", str(tmp_path / "missing.json")]) == 1
