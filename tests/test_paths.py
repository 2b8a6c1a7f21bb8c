import importlib

import kukai.utils.paths as paths


def test_dotenv_sets_root(tmp_path, monkeypatch):
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    (tmp_path / ".env").write_text(f"KUKAI_ROOT={elsewhere}\n", encoding="utf-8")

    # make sure KUKAI_ROOT is removed again once the test is done
    monkeypatch.setenv("KUKAI_ROOT", "unset")
    monkeypatch.delenv("KUKAI_ROOT")
    monkeypatch.chdir(tmp_path)
    try:
        reloaded = importlib.reload(paths)
        assert reloaded.ROOT == elsewhere.resolve()
        assert reloaded.LOG_DIR == elsewhere.resolve() / "logs"
    finally:
        monkeypatch.undo()
        importlib.reload(paths)


def test_default_report_path():
    out = paths.default_report_path(paths.SNAPSHOT_DIR / "spring_2026.json")
    assert out == paths.OUTPUT_DIR / "spring_2026_results.html"
