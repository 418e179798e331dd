"""CLI tests"""
import json

import pytest
from click.testing import CliRunner

from cli import cli


@pytest.fixture
def run(tmp_path):
    runner = CliRunner()
    data_file = str(tmp_path / "cli_data.xlsx")

    def _run(*args, **kwargs):
        return runner.invoke(cli, ["--data-file", data_file, *args], **kwargs)

    return _run


class TestCli:
    def test_list_groups_shows_sample_data(self, run):
        result = run("list-groups")
        assert result.exit_code == 0
        assert "Sakthi Group" in result.output

    def test_add_collection_allocates(self, run):
        result = run("add-collection", "--member-id", "M001", "--week-no", "4", "--amount", "1000")
        assert result.exit_code == 0
        assert "principal 714.29, interest 285.71" in result.output

        result = run("member-summary", "--member-id", "M001")
        assert "weeksPaid: 4" in result.output

    def test_add_collection_unknown_member(self, run):
        result = run("add-collection", "--member-id", "M999", "--week-no", "1", "--amount", "100")
        assert result.exit_code != 0
        assert "Unknown member" in result.output

    def test_add_member_validates_group(self, run):
        result = run(
            "add-member", "--member-id", "M006", "--member-name", "Test",
            "--group-no", "G999", "--loan-amount", "1000", "--total-interest", "400",
        )
        assert result.exit_code != 0
        assert "Unknown group" in result.output

    def test_add_group_then_summary(self, run):
        assert run("add-group", "--group-no", "G004", "--group-name", "Nila Group").exit_code == 0
        result = run("group-summary", "--group-no", "G004")
        assert "groupName: Nila Group" in result.output
        assert "collectionRate: 0" in result.output

    def test_weekly(self, run):
        result = run("weekly")
        assert result.exit_code == 0
        assert "2500.0" in result.output

    def test_expected(self, run):
        result = run("expected", "--week-no", "3")
        assert result.exit_code == 0
        assert "M001 Lakshmi Devi (G001): 3/14 paid" in result.output
        assert "next due 2025-01-29" in result.output

    def test_export_import(self, run, tmp_path):
        out = tmp_path / "backup.json"
        assert run("export", "--output", str(out)).exit_code == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        data["groups"] = data["groups"][:1]
        out.write_text(json.dumps(data), encoding="utf-8")

        assert run("import", str(out)).exit_code == 0
        result = run("list-groups")
        assert "Sakthi Group" in result.output
        assert "Anbu Group" not in result.output

    def test_import_malformed(self, run, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{oops", encoding="utf-8")
        result = run("import", str(bad))
        assert result.exit_code != 0
        assert "Could not import" in result.output

    def test_clear(self, run):
        assert run("clear", "--yes").exit_code == 0
        assert "No groups." in run("list-groups").output

    def test_report(self, run, tmp_path):
        report = tmp_path / "report.xlsx"
        result = run("report", "--output", str(report))
        assert result.exit_code == 0
        assert report.exists()
