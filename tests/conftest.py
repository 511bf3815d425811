import io

import pytest


@pytest.fixture
def make_file(tmp_path):
    """Write ``data`` to a file under ``tmp_path`` and return its path as a string."""

    counter = {"n": 0}

    def _make(data: bytes, name: str | None = None) -> str:
        counter["n"] += 1
        path = tmp_path / (name or f"input_{counter['n']}.txt")
        path.write_bytes(data)
        return str(path)

    return _make


@pytest.fixture
def fake_stdin(monkeypatch):
    def _patch(data: bytes) -> None:
        monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))

    return _patch
