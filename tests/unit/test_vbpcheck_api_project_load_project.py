"""Unit tests for load_project."""

from tests.conftest import write_project
from vbpcheck.api.project import CheckResult, LoadedProject, ReferenceKind, load_project


def test_load_project_collects_references(tmp_path):
    path = write_project(
        tmp_path,
        classes=["Classes\\CCustomer.cls"],
        modules=["modMain.bas"],
        forms=["frmMain.frm", "frmAbout.frm"],
        sub_projects=["..\\Lib\\Lib.vbp"],
    )

    loaded = load_project(path)

    assert isinstance(loaded, LoadedProject)
    assert loaded.directory == tmp_path
    assert [ref.path for ref in loaded.references_of(ReferenceKind.CLASS)] == ["Classes\\CCustomer.cls"]
    assert [ref.path for ref in loaded.references_of(ReferenceKind.FORM)] == ["frmMain.frm", "frmAbout.frm"]
    # The compiled stdole reference is not a project file
    assert [ref.path for ref in loaded.references_of(ReferenceKind.SUB_PROJECT)] == ["..\\Lib\\Lib.vbp"]
    assert all(ref.kind is ReferenceKind.MODULE for ref in loaded.references_of(ReferenceKind.MODULE))


def test_load_project_unreadable_file(tmp_path):
    path = tmp_path / "Gone.vbp"

    loaded = load_project(path)

    assert isinstance(loaded, CheckResult)
    assert loaded.project_path == str(path)
    assert len(loaded.parsing_errors) == 1
    assert loaded.parsing_errors[0].startswith(f"Failed to read {path}:")
    assert loaded.missing_files == []


def test_load_project_parse_failure(tmp_path):
    path = tmp_path / "Broken.vbp"
    path.write_bytes(b"Type=Exe\r\nthis is not a setting\r\n")

    loaded = load_project(path)

    assert isinstance(loaded, CheckResult)
    assert loaded.parsing_errors == ["Broken.vbp:2: expected 'key=value' (this is not a setting)"]
    assert loaded.non_english_files == []


def test_load_project_descriptor_in_foreign_code_page_is_a_parse_error(tmp_path):
    path = tmp_path / "Проект.vbp"
    path.write_bytes("Тип=Exe\r\n".encode("cp1251") + b"\x81\r\n")

    loaded = load_project(path)

    assert isinstance(loaded, CheckResult)
    assert len(loaded.parsing_errors) == 1
    assert "likely non-English character set" in loaded.parsing_errors[0]
    assert loaded.non_english_files == []
