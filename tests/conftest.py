import pytest
from pathlib import Path


@pytest.fixture
def make_file(tmp_path):
    """Factory: make_file("sub/name.txt", b"data") -> Path under tmp_path."""
    def _make(rel: str, data: bytes = b"") -> Path:
        p = tmp_path / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(data)
        return p
    return _make


@pytest.fixture
def tree(make_file, tmp_path):
    """
    tmp_path/
        a.txt, b.JPG, noext
        sub/c.txt
        sub/deep/d.png
    """
    make_file("a.txt", b"a")
    make_file("b.JPG", b"b")
    make_file("noext", b"n")
    make_file("sub/c.txt", b"c")
    make_file("sub/deep/d.png", b"d")
    return tmp_path
