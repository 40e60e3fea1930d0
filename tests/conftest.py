"""Shared pytest configuration and fixtures for all tests."""

from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single function or class")
    config.addinivalue_line("markers", "integration: tests that drive the CLI end to end")
    config.addinivalue_line("markers", "project: project check tests")
    config.addinivalue_line("markers", "config: configuration tests")
    config.addinivalue_line("markers", "cli: command-line tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# VB6 Sample Sources
# =============================================================================

CLASS_SOURCE = b"""VERSION 1.0 CLASS
BEGIN
  MultiUse = -1  'True
  Persistable = 0  'NotPersistable
  DataBindingBehavior = 0  'vbNone
  DataSourceBehavior  = 0  'vbNone
  MTSTransactionMode  = 0  'NotAnMTSObject
END
Attribute VB_Name = "CCustomer"
Attribute VB_GlobalNameSpace = False
Attribute VB_Creatable = True
Attribute VB_PredeclaredId = False
Attribute VB_Exposed = False
Option Explicit

Private mName As String

Public Property Get Name() As String
    Name = mName
End Property
"""

MODULE_SOURCE = b"""Attribute VB_Name = "modMain"
Option Explicit

Public Sub Main()
    frmMain.Show
End Sub
"""

FORM_SOURCE = b"""VERSION 5.00
Object = "{831FDD16-0C5C-11D2-A9FC-0000F8754DA1}#2.0#0"; "MSCOMCTL.OCX"
Begin VB.Form frmMain
   Caption         =   "Main"
   ClientHeight    =   3195
   ClientWidth     =   4680
   BeginProperty Font
      Name            =   "MS Sans Serif"
      Size            =   8.25
   EndProperty
   Begin VB.CommandButton cmdOk
      Caption         =   "OK"
      Height          =   375
   End
End
Attribute VB_Name = "frmMain"
Attribute VB_GlobalNameSpace = False
Attribute VB_Creatable = False
Option Explicit

Private Sub cmdOk_Click()
    Unload Me
End Sub
"""

# Header keywords written in a foreign code page: structurally invalid and non-ASCII
NON_ENGLISH_CLASS_SOURCE = "VERSION 1.0 CLASS\r\nДЕЛО\r\n".encode("cp1251")

# 0x81 is undefined in Windows-1252
UNDECODABLE_SOURCE = b"Attribute VB_Name = \"mod\x81\"\r\n"

BROKEN_CLASS_SOURCE = b"VERSION 1.0 CLASS\r\nBEGIN\r\n  MultiUse = -1\r\n"


def project_source(
    classes: list[str] | None = None,
    modules: list[str] | None = None,
    forms: list[str] | None = None,
    sub_projects: list[str] | None = None,
) -> bytes:
    """Build the bytes of a .vbp descriptor listing the given files."""
    lines = ["Type=Exe"]
    lines.append(
        "Reference=*\\G{00020430-0000-0000-C000-000000000046}#2.0#0#..\\..\\Windows\\System32\\stdole2.tlb#OLE Automation"
    )
    lines.extend(f"Reference=*\\A{path}" for path in sub_projects or [])
    lines.extend(f"Form={path}" for path in forms or [])
    lines.extend(f"Module=Module{index}; {path}" for index, path in enumerate(modules or []))
    lines.extend(f"Class=Class{index}; {path}" for index, path in enumerate(classes or []))
    lines.extend(['Startup="Sub Main"', 'Name="Sample"', "", "[MS Transaction Server]", "AutoRefresh=1"])
    return ("\r\n".join(lines) + "\r\n").encode("cp1252")


def write_project(directory: Path, name: str = "Sample.vbp", **references: list[str]) -> Path:
    """Write a .vbp descriptor into ``directory`` and return its path."""
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_bytes(project_source(**references))
    return path


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def vbpcheck_home(tmp_path_factory, monkeypatch) -> Path:
    """Point VBPCHECK_HOME at an empty directory so a user config never leaks into tests."""
    home = tmp_path_factory.mktemp("vbpcheck_home")
    monkeypatch.setenv("VBPCHECK_HOME", str(home))
    return home


@pytest.fixture
def sample_project(tmp_path: Path) -> Path:
    """A clean project with one file of every kind, referenced with backslashes."""
    root = tmp_path / "sample"
    (root / "Classes").mkdir(parents=True)
    (root / "Classes" / "CCustomer.cls").write_bytes(CLASS_SOURCE)
    (root / "modMain.bas").write_bytes(MODULE_SOURCE)
    (root / "frmMain.frm").write_bytes(FORM_SOURCE)
    write_project(tmp_path / "Lib", "Lib.vbp")
    return write_project(
        root,
        classes=["Classes\\CCustomer.cls"],
        modules=["modMain.bas"],
        forms=["frmMain.frm"],
        sub_projects=["..\\Lib\\Lib.vbp"],
    )
