"""Unit tests for project cmd_check."""

import importlib
import json
from pathlib import Path

import pytest

from tests.conftest import run_cmd, write_project
from vbpcheck.api.project.cmd_check import cmd_check
from vbpcheck.api.validate_output import validate_output

pytestmark = pytest.mark.project

check_projects_module = importlib.import_module("vbpcheck.api.project.check_projects")


class TestCmdCheck:
    def test_single_project(self, sample_project):
        result = run_cmd(cmd_check, str(sample_project))

        assert result.success
        assert result.result == f"No errors found in {sample_project}."
        assert result.output["project_count"] == 1
        assert result.output["projects"][0]["project_path"] == str(sample_project)
        assert result.output["totals"] == {"parsing_errors": 0, "non_english_files": 0, "missing_files": 0}
        assert result.output["errors"] == []

    def test_directory(self, tmp_path):
        write_project(tmp_path / "a", classes=["Missing.cls"])
        write_project(tmp_path / "b")

        result = run_cmd(cmd_check, str(tmp_path))

        assert result.success
        assert result.output["project_count"] == 2
        assert result.output["summary"] == "1 missing files in 2 projects."
        assert [p["project_path"] for p in result.output["projects"]] == [
            str(tmp_path / "a" / "Sample.vbp"),
            str(tmp_path / "b" / "Sample.vbp"),
        ]

    def test_directory_without_projects(self, tmp_path):
        result = run_cmd(cmd_check, str(tmp_path))

        assert result.success
        assert result.output["project_count"] == 0
        assert result.result == "No errors found in 0 projects."

    def test_missing_path(self, tmp_path):
        target = tmp_path / "Nowhere.vbp"

        result = run_cmd(cmd_check, str(target))

        assert result.success is False
        assert result.result == f"No project file found at '{target}'."
        assert result.output["errors"] == [result.result]
        assert result.output["projects"] == []

    def test_defaults_to_working_directory(self, tmp_path, monkeypatch):
        write_project(tmp_path)
        monkeypatch.chdir(tmp_path)

        result = run_cmd(cmd_check)

        assert Path(result.output["path"]).resolve() == tmp_path.resolve()
        assert result.output["project_count"] == 1

    def test_argument_disables_category(self, tmp_path):
        path = write_project(tmp_path, classes=["Missing.cls"])

        result = run_cmd(cmd_check, str(path), check_classes=False)

        assert result.result == f"No errors found in {path}."

    def test_config_disables_category(self, tmp_path, vbpcheck_home):
        (vbpcheck_home / "config.json").write_text(json.dumps({"check": {"classes": False}}))
        path = write_project(tmp_path, classes=["Missing.cls"], modules=["missing.bas"])

        result = run_cmd(cmd_check, str(path))

        assert result.output["totals"]["missing_files"] == 1
        assert result.output["projects"][0]["missing_files"][0].startswith("Module not found:")

    def test_invalid_config(self, tmp_path, vbpcheck_home):
        (vbpcheck_home / "config.json").write_text("{invalid json")
        path = write_project(tmp_path)

        result = run_cmd(cmd_check, str(path))

        assert result.success is False
        assert result.result.startswith("Failed to load config: Invalid JSON in config file")
        assert result.output["errors"] == [result.result]

    def test_output_matches_schema(self, sample_project):
        result = run_cmd(cmd_check, str(sample_project))

        validated = validate_output(cmd_check, result.output)

        assert validated["summary"] == result.output["summary"]
        assert validated["projects"] == result.output["projects"]

    def test_single_file_failure_is_isolated(self, tmp_path, monkeypatch):
        path = write_project(tmp_path)

        def broken_check_project(settings, parser=None):
            raise RuntimeError("boom")

        monkeypatch.setattr(check_projects_module, "check_project", broken_check_project)

        result = run_cmd(cmd_check, str(path))

        assert result.success
        assert result.output["projects"][0]["parsing_errors"] == ["Unexpected failure checking project: boom"]
        assert result.result == "1 errors found in the project."
