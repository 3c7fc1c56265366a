import pytest

from core.descent import directory_entry, resolve_contents, resolve_directories
from core.errors import DirectoryNotFoundError, LimitExceededError
from core.models import EntryKind, WalkLimits


def _paths(entries):
    return [e.path for e in entries]


def test_resolve_directories_star(fake_tree):
    out = resolve_directories(fake_tree, "/w/base/", "*")
    assert _paths(out) == ["/w/base/src", "/w/base/docs"]
    assert all(e.kind is EntryKind.DIRECTORY for e in out)


def test_resolve_directories_multi_segment(fake_tree):
    out = resolve_directories(fake_tree, "/w/base/", "*/int*")
    assert _paths(out) == ["/w/base/src/internal"]


def test_resolve_directories_never_returns_files(fake_tree):
    assert resolve_directories(fake_tree, "/w/base/", "top.txt") == []


def test_resolve_contents_last_segment_matches_files(fake_tree):
    out = resolve_contents(fake_tree, "/w/base/", "src/*.go")
    assert _paths(out) == ["/w/base/src/main.go", "/w/base/src/util.go"]
    assert all(e.kind is EntryKind.FILE for e in out)


def test_resolve_contents_directories_before_files(fake_tree):
    out = resolve_contents(fake_tree, "/w/base/", "src/*")
    assert _paths(out) == [
        "/w/base/src/internal",
        "/w/base/src/main.go",
        "/w/base/src/util.go",
    ]


def test_resolve_contents_files_are_not_descended_into(fake_tree):
    # 'top.txt' matches the first segment but only directories recurse
    assert resolve_contents(fake_tree, "/w/base/", "t*/x") == []


def test_plain_file_name_is_not_descended_into(fake_tree):
    assert resolve_contents(fake_tree, "/w/base/", "top.txt/x") == []
    assert resolve_directories(fake_tree, "/w/base/", "top.txt/*") == []
    # Same answer with or without wildcards in the segment
    assert resolve_contents(fake_tree, "/w/base/", "top.tx?/x") == []


def test_results_concatenate_in_listing_order(fake_tree):
    out = resolve_contents(fake_tree, "/w/base/", "*/*.*")
    assert _paths(out) == [
        "/w/base/src/main.go",
        "/w/base/src/util.go",
        "/w/base/docs/readme.md",
    ]


def test_dot_segment_is_noop(fake_tree):
    assert resolve_directories(fake_tree, "/w/base/", "./src") == resolve_directories(
        fake_tree, "/w/base/", "src"
    )
    assert _paths(resolve_contents(fake_tree, "/w/base/", "./././docs/*")) == ["/w/base/docs/readme.md"]


def test_dotdot_segment_moves_to_parent(fake_tree):
    out = resolve_directories(fake_tree, "/w/base/", "../sub")
    assert _paths(out) == ["/w/sub"]
    assert out == resolve_directories(fake_tree, "/w", "sub")


def test_dotdot_after_descent(fake_tree):
    out = resolve_contents(fake_tree, "/w/base/", "src/../docs/*.md")
    assert _paths(out) == ["/w/base/docs/readme.md"]


def test_dotdot_never_reaches_translator(fake_tree):
    # '..' would otherwise translate to a regex matching any two-character name
    fake_tree.dirs.append("/w/base/ab")
    out = resolve_directories(fake_tree, "/w/base/src/", "..")
    assert _paths(out) == ["/w/base"]


def test_empty_segment_in_directory_mode_stays(fake_tree):
    assert _paths(resolve_directories(fake_tree, "/w/base/", "")) == ["/w/base"]
    assert _paths(resolve_directories(fake_tree, "/w/base/", "src//internal")) == ["/w/base/src/internal"]


def test_empty_segment_in_contents_mode_selects_all_children(fake_tree):
    out = resolve_contents(fake_tree, "/w/base/", "")
    assert _paths(out) == ["/w/base/src", "/w/base/docs", "/w/base/top.txt"]


def test_trailing_separator_is_ignored(fake_tree):
    assert _paths(resolve_directories(fake_tree, "/w/base/", "src/")) == ["/w/base/src"]


def test_class_with_separator_is_one_segment(fake_tree):
    out = resolve_contents(fake_tree, "/w/base/", "src/[m/u]*.go")
    assert _paths(out) == ["/w/base/src/main.go", "/w/base/src/util.go"]


def test_missing_directory_raises(fake_tree):
    with pytest.raises(DirectoryNotFoundError):
        resolve_directories(fake_tree, "/w/nope/", "*")


def test_missing_literal_directory_on_the_way_down_raises(fake_tree):
    with pytest.raises(DirectoryNotFoundError):
        resolve_directories(fake_tree, "/w/base/", "nope/*")


def test_missing_literal_last_segment_is_empty(fake_tree):
    assert resolve_directories(fake_tree, "/w/base/", "nope") == []
    assert resolve_contents(fake_tree, "/w/base/", "src/nope.go") == []


def test_wildcard_matching_nothing_is_empty(fake_tree):
    assert resolve_directories(fake_tree, "/w/base/", "zz*/x") == []


def test_literal_last_segment_selects_file_in_contents_mode(fake_tree):
    out = resolve_contents(fake_tree, "/w/base/", "src/main.go")
    assert [(e.path, e.name, e.kind) for e in out] == [("/w/base/src/main.go", "main.go", EntryKind.FILE)]


def test_start_that_is_a_file_raises(fake_tree):
    with pytest.raises(DirectoryNotFoundError):
        resolve_contents(fake_tree, "/w/base/top.txt", "*")


def test_resolve_is_repeatable(fake_tree):
    first = resolve_contents(fake_tree, "/w/base/", "*/*")
    second = resolve_contents(fake_tree, "/w/base/", "*/*")
    assert first == second


def test_directory_entry_names():
    e = directory_entry("/w/base/")
    assert (e.path, e.name, e.kind) == ("/w/base", "base", EntryKind.DIRECTORY)
    assert directory_entry("/").path == "/"


def test_literal_segments_do_not_list_directories(fake_tree):
    resolve_contents(fake_tree, "/w/base/", "src/main.go")
    assert fake_tree.listed == []


def test_literal_entry_name_matches_its_path(fake_tree):
    out = resolve_directories(fake_tree, "/w/base/", "src/internal")
    assert [(e.name, e.path.rsplit("/", 1)[-1]) for e in out] == [("internal", "internal")]


def test_entry_limit_stops_descent_early(fake_tree):
    with pytest.raises(LimitExceededError):
        resolve_contents(fake_tree, "/w/base/", "*/*", limits=WalkLimits(max_entries=1))
    # 'src' alone already exceeds the limit, so 'docs' is never listed
    assert fake_tree.listed == ["/w/base", "/w/base/src"]


def test_entry_limit_allows_results_within_ceiling(fake_tree):
    out = resolve_contents(fake_tree, "/w/base/", "*/*", limits=WalkLimits(max_entries=4))
    assert len(out) == 4


def test_depth_limit_stops_descent(fake_tree):
    limits = WalkLimits(max_depth=1)
    assert resolve_contents(fake_tree, "/w/base/", "*/*", limits=limits) == []
    assert fake_tree.listed == ["/w/base"]
    assert resolve_contents(fake_tree, "/w/base/", "src/main.go", limits=limits) == []
    assert _paths(resolve_contents(fake_tree, "/w/base/", "*", limits=limits)) == [
        "/w/base/src",
        "/w/base/docs",
        "/w/base/top.txt",
    ]


def test_depth_limit_ignores_empty_segments(fake_tree):
    out = resolve_directories(fake_tree, "/w/base/", "src//internal", limits=WalkLimits(max_depth=2))
    assert _paths(out) == ["/w/base/src/internal"]
