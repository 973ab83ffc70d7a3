"""Shared fixtures: an in-memory stand-in for the gnuplot process."""

import io

import pytest
from rich.console import Console

from plotpipe.interfaces.config import SessionConfig
from plotpipe.session.core import PlotSession


class RecordingPipe:
    """Write-only text stream that exposes complete, flushed lines."""

    def __init__(self):
        self.lines = []
        self.closed = False
        self.broken = False
        self._pending = ""

    def write(self, text):
        if self.closed:
            raise ValueError("I/O operation on closed file.")
        if self.broken:
            raise BrokenPipeError(32, "Broken pipe")
        self._pending += text
        return len(text)

    def flush(self):
        *complete, self._pending = self._pending.split("\n")
        self.lines.extend(complete)

    def close(self):
        self.closed = True


class FakeProcess:
    """Minimal ``subprocess.Popen`` lookalike with a recording stdin."""

    def __init__(self, args=("gnuplot",)):
        self.args = list(args)
        self.stdin = RecordingPipe()
        self.returncode = None
        self.wait_error = None

    def wait(self, timeout=None):
        if self.wait_error is not None:
            raise self.wait_error
        self.returncode = 0
        return 0


@pytest.fixture
def fake_process_factory():
    created = []

    def factory(*args, **kwargs):
        process = FakeProcess(args[0] if args else ("gnuplot",))
        created.append(process)
        return process

    factory.created = created
    return factory


@pytest.fixture
def config(tmp_path):
    return SessionConfig(tmp_dir=tmp_path, terminal="dumb", max_temp_files=8)


@pytest.fixture
def record_console():
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def session(config, record_console):
    plot_session = PlotSession(FakeProcess(), config=config, console=record_console)
    yield plot_session
    plot_session.close()


@pytest.fixture
def sent(session):
    """Lines received so far by the fake gnuplot behind ``session``."""

    return session.process.stdin.lines


@pytest.fixture
def session_factory(record_console):
    """Build extra sessions on fake processes; all are closed at teardown."""

    sessions = []

    def factory(session_config):
        plot_session = PlotSession(FakeProcess(), config=session_config, console=record_console)
        sessions.append(plot_session)
        return plot_session

    yield factory
    for plot_session in sessions:
        plot_session.close()
