import pytest

from shellguard.fsutil import ensure_log_directory


def test_creates_missing_nested_directory(tmp_path):
    log_path = tmp_path / "a" / "b" / "server.log"
    ensure_log_directory(str(log_path))
    assert log_path.parent.is_dir()
    assert not log_path.exists()


def test_existing_directory_is_left_alone(tmp_path):
    marker = tmp_path / "keep.txt"
    marker.write_text("x", encoding="utf-8")
    ensure_log_directory(str(tmp_path / "server.log"))
    assert marker.read_text(encoding="utf-8") == "x"
    assert sorted(p.name for p in tmp_path.iterdir()) == ["keep.txt"]


def test_empty_path_does_nothing(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    marker = tmp_path / "marker.txt"
    marker.write_text("m", encoding="utf-8")
    result = ensure_log_directory("")
    assert result is None
    assert sorted(p.name for p in tmp_path.iterdir()) == ["marker.txt"]
    assert marker.read_text(encoding="utf-8") == "m"


def test_bare_file_name_uses_current_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    marker = tmp_path / "marker.txt"
    marker.write_text("m", encoding="utf-8")
    result = ensure_log_directory("server.log")
    assert result is None
    assert sorted(p.name for p in tmp_path.iterdir()) == ["marker.txt"]
    assert not (tmp_path / "server.log").exists()


def test_parent_is_a_file_raises(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(OSError, match="failed to check log directory"):
        ensure_log_directory(str(blocker / "sub" / "server.log"))