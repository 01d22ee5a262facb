import pytest


class SequenceSource:
    """Replays fixed 32-bit values, then repeats the last one."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def next_uniform32(self):
        i = min(self.calls, len(self.values) - 1)
        self.calls += 1
        return self.values[i]


@pytest.fixture
def sequence_source():
    return SequenceSource


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("PASSFORGE_HOME", str(tmp_path))
    return tmp_path
