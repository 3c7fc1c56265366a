import pytest

from core.models import EntryKind, FileSystemEntry


class DummyMCP:
    """Minimal FastMCP stand-in to capture tool and resource registration."""

    def __init__(self) -> None:
        self.tools = {}
        self.resources = {}

    def tool(self, *, name: str):
        def _decorator(fn):
            self.tools[name] = fn
            return fn
        return _decorator

    def resource(self, uri: str, **kwargs):
        def _decorator(fn):
            self.resources[uri] = fn
            return fn
        return _decorator


class FakeLister:
    """In-memory DirectoryLister over absolute '/' paths.

    Children are listed in the order the paths were given, so tests can
    check that the engine keeps the lister's order.
    """

    def __init__(self, dirs, files=()) -> None:
        self.dirs = list(dirs)
        self.files = list(files)
        self.listed = []

    @staticmethod
    def _norm(path: str) -> str:
        return path.rstrip("/") or "/"

    def kind(self, path):
        p = self._norm(path)
        if p in self.dirs:
            return EntryKind.DIRECTORY
        if p in self.files:
            return EntryKind.FILE
        return None

    def _children(self, pool, parent):
        prefix = parent if parent.endswith("/") else parent + "/"
        return [
            x for x in pool
            if x != parent and x.startswith(prefix) and "/" not in x[len(prefix):]
        ]

    def list_children(self, path):
        p = self._norm(path)
        self.listed.append(p)
        dirs = [
            FileSystemEntry(kind=EntryKind.DIRECTORY, path=x, name=x.rsplit("/", 1)[-1])
            for x in self._children(self.dirs, p)
        ]
        files = [
            FileSystemEntry(kind=EntryKind.FILE, path=x, name=x.rsplit("/", 1)[-1])
            for x in self._children(self.files, p)
        ]
        return dirs, files

    def canonical(self, path):
        return self._norm(path)


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


@pytest.fixture
def fake_tree():
    # /w/base holds src (two .go files) and docs; /w/sub is a sibling of base.
    return FakeLister(
        dirs=[
            "/",
            "/w",
            "/w/base",
            "/w/base/src",
            "/w/base/docs",
            "/w/base/src/internal",
            "/w/sub",
        ],
        files=[
            "/w/base/top.txt",
            "/w/base/src/main.go",
            "/w/base/src/util.go",
            "/w/base/src/internal/deep.go",
            "/w/base/docs/readme.md",
            "/w/sub/other.txt",
        ],
    )


@pytest.fixture
def sample_project(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "main.go").write_text("package main\n", encoding="utf-8")
    (tmp_path / "src" / "util.go").write_text("package main\n", encoding="utf-8")
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "readme.md").write_text("# readme\n", encoding="utf-8")
    return tmp_path.resolve()
