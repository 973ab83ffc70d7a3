# Unit tests for executable lookup

import os
import stat

import pytest

from plotpipe.interfaces.errors import ExecutableNotFound
from plotpipe.utils.paths import find_program_path, resolve_executable


def _make_executable(path):
    path.write_text("#!/bin/sh\n", encoding="utf-8")
    path.chmod(path.stat().st_mode | stat.S_IXUSR)
    return path


@pytest.mark.skipif(os.name == "nt", reason="POSIX executable bits")
class TestLookup:
    def test_finds_program_on_path(self, tmp_path, monkeypatch):
        bindir = tmp_path / "bin"
        bindir.mkdir()
        _make_executable(bindir / "fakeplot")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("PATH", str(bindir))

        assert resolve_executable("fakeplot") == (bindir / "fakeplot").resolve()
        assert find_program_path("fakeplot") == bindir.resolve()

    def test_working_directory_wins(self, tmp_path, monkeypatch):
        bindir = tmp_path / "bin"
        bindir.mkdir()
        _make_executable(bindir / "fakeplot")
        _make_executable(tmp_path / "fakeplot")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("PATH", str(bindir))

        assert find_program_path("fakeplot") == tmp_path.resolve()

    def test_missing_program(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("PATH", str(tmp_path / "nowhere"))

        assert find_program_path("fakeplot") is None
        with pytest.raises(ExecutableNotFound, match="fakeplot"):
            resolve_executable("fakeplot")

    def test_paths_are_rejected(self):
        with pytest.raises(ExecutableNotFound):
            resolve_executable("/bin/ls")
        assert find_program_path("/bin/ls") is None

    def test_lookups_do_not_share_results(self, tmp_path, monkeypatch):
        first, second = tmp_path / "a", tmp_path / "b"
        first.mkdir()
        second.mkdir()
        _make_executable(first / "one")
        _make_executable(second / "two")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("PATH", os.pathsep.join([str(first), str(second)]))

        one = find_program_path("one")
        two = find_program_path("two")
        assert one == first.resolve()
        assert two == second.resolve()
