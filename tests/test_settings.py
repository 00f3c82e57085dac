import json

from llcmerge.settings import LastRun, load_last_run, save_last_run


def test_missing_file_gives_none(tmp_path):
    assert load_last_run(tmp_path / "none.json") is None


def test_round_trip(tmp_path):
    path = tmp_path / "last_run.json"
    settings = LastRun("源", "/dst", "KR_", "EN_")
    save_last_run(settings, path)
    assert load_last_run(path) == settings


def test_saved_keys(tmp_path):
    path = tmp_path / "last_run.json"
    save_last_run(LastRun(src_dir="a"), path)
    assert set(json.loads(path.read_text(encoding="utf-8"))) == {
        "src_dir", "dst_dir", "src_prefix", "dst_prefix"
    }


def test_broken_file_gives_empty_settings(tmp_path):
    path = tmp_path / "last_run.json"
    path.write_text("{broken")
    assert load_last_run(path) == LastRun()


def test_partial_file(tmp_path):
    path = tmp_path / "last_run.json"
    path.write_text(json.dumps({"dst_dir": "/d"}))
    assert load_last_run(path) == LastRun(dst_dir="/d")