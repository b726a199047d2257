from typer.testing import CliRunner

from linelink.cli.config import config
from linelink.cli.repo import repo

runner = CliRunner()


def test_repo_resolve_cli_git(git_repo):
    result = runner.invoke(repo(), ["resolve", str(git_repo / "src" / "a.txt")])
    assert result.exit_code == 0
    assert "identifier: https://example.com/r.git" in result.stdout


def test_repo_resolve_cli_workspace(text_file, write_config):
    write_config({"workspace": {"folders": [{"name": "notes", "root": str(text_file.parent)}]}})
    result = runner.invoke(repo(), ["resolve", str(text_file)])
    assert result.exit_code == 0
    assert "kind: workspace" in result.stdout
    assert "relative_path: notes.txt" in result.stdout


def test_repo_resolve_cli_failure(text_file):
    result = runner.invoke(repo(), ["resolve", str(text_file)])
    assert result.exit_code == 1
    assert "NoRepositoryContext" in result.stdout


def test_config_show_cli_lists_sections():
    result = runner.invoke(config(), ["show"])
    assert result.exit_code == 0
    assert "- link" in result.stdout
    assert "- workspace" in result.stdout


def test_config_show_cli_section(write_config):
    write_config({"link": {"scheme": "cursor", "portable": True}})
    result = runner.invoke(config(), ["show", "link"])
    assert result.exit_code == 0
    assert "scheme: cursor" in result.stdout
    assert "portable: true" in result.stdout


def test_config_show_cli_invalid_json(linelink_home):
    (linelink_home / "config.json").write_text("{not json", encoding="utf-8")
    result = runner.invoke(config(), ["show"])
    assert result.exit_code == 1
    assert "Invalid JSON in config file" in result.stdout


def test_config_version_cli():
    result = runner.invoke(config(), ["version"])
    assert result.exit_code == 0
    assert "full_version:" in result.stdout


def test_config_show_cli_outputs_valid_yaml_keys():
    result = runner.invoke(config(), ["show", "git"])
    assert result.exit_code == 0
    assert "executable: git" in result.stdout
    assert "timeout_secs: 5.0" in result.stdout
