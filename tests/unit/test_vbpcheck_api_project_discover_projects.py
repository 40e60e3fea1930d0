"""Unit tests for discover_projects."""

import os

from tests.conftest import write_project
from vbpcheck.api.project import discover_projects


def test_finds_projects_recursively_in_sorted_order(tmp_path):
    write_project(tmp_path / "b", "Second.vbp")
    write_project(tmp_path / "a" / "nested", "Nested.vbp")
    write_project(tmp_path / "a", "First.vbp")
    write_project(tmp_path, "Top.vbp")

    discovered = discover_projects(tmp_path)

    assert [entry.path for entry in discovered] == [
        tmp_path / "Top.vbp",
        tmp_path / "a" / "First.vbp",
        tmp_path / "a" / "nested" / "Nested.vbp",
        tmp_path / "b" / "Second.vbp",
    ]
    assert not any(entry.failed for entry in discovered)


def test_extension_match_is_case_sensitive(tmp_path):
    write_project(tmp_path, "Upper.VBP")
    write_project(tmp_path, "Group.vbg")
    write_project(tmp_path, "Lower.vbp")

    discovered = discover_projects(tmp_path)

    assert [entry.path.name for entry in discovered] == ["Lower.vbp"]


def test_custom_extension(tmp_path):
    write_project(tmp_path, "Group.vbg")
    write_project(tmp_path, "App.vbp")

    assert [entry.path.name for entry in discover_projects(tmp_path, ".vbg")] == ["Group.vbg"]


def test_empty_directory(tmp_path):
    assert discover_projects(tmp_path) == []


def test_dangling_link_is_a_failed_entry(tmp_path):
    link = tmp_path / "Gone.vbp"
    os.symlink(tmp_path / "nowhere" / "Gone.vbp", link)

    (entry,) = discover_projects(tmp_path)

    assert entry.path == link
    assert entry.failed
    assert entry.error == f"{link}: dangling link"


def test_traversal_error_is_a_failed_entry(tmp_path, monkeypatch):
    locked = tmp_path / "locked"
    real_walk = os.walk

    def walk_with_error(top, onerror=None, **kwargs):
        onerror(PermissionError(13, "Permission denied", str(locked)))
        yield from real_walk(top, onerror=onerror, **kwargs)

    write_project(tmp_path, "App.vbp")
    monkeypatch.setattr(os, "walk", walk_with_error)

    discovered = discover_projects(tmp_path)

    assert [entry.failed for entry in discovered] == [True, False]
    assert discovered[0].path == locked
    assert discovered[0].error == f"[Errno 13] Permission denied: '{locked}'"
    assert discovered[1].path == tmp_path / "App.vbp"
