"""Tests for cmd_open."""

from pathlib import Path

from linelink.api.errors import TargetNotFound
from linelink.api.link.cmd_open import cmd_open
from linelink.api.link.encode_link import encode_link
from tests.conftest import run_cmd


class RecordingLauncher:
    def __init__(self, error: Exception | None = None):
        self.calls: list[tuple[Path, int]] = []
        self.error = error

    def launch(self, path: Path, line_index: int) -> list[str]:
        if self.error is not None:
            raise self.error
        self.calls.append((path, line_index))
        return ["editor", f"+{line_index + 1}", str(path)]


def test_cmd_open_shows_line(text_file):
    result = run_cmd(cmd_open, link=encode_link(text_file, 3))

    assert result.success is True
    assert result.output["path"] == str(text_file)
    assert result.output["line"] == 3
    assert result.output["line_index"] == 2
    assert result.output["text"] == "three"
    assert result.output["context_start"] == 1
    assert result.output["context"] == ["one", "two", "three", "four", "five", ""]
    assert result.output["editor_command"] == []
    assert result.result == f"Opened {text_file} at line 3"


def test_cmd_open_query_style_link(text_file):
    link = encode_link(text_file, 1).rsplit(":", 1)[0] + "?line=5"
    result = run_cmd(cmd_open, link=link)
    assert result.output["text"] == "five"


def test_cmd_open_uses_context_lines_from_config(text_file, write_config):
    write_config({"link": {"context_lines": 0}})
    result = run_cmd(cmd_open, link=encode_link(text_file, 2))
    assert result.output["context"] == ["two"]


def test_cmd_open_maps_portable_link_to_checkout(tmp_path, write_config):
    checkout = tmp_path / "checkout"
    (checkout / "src").mkdir(parents=True)
    (checkout / "src" / "a.txt").write_text("alpha\nbeta\n")
    write_config({"link": {"checkouts": {"https://example.com/r.git": str(checkout)}}})
    link = encode_link("/other/machine/r/src/a.txt", 2, repository="https://example.com/r.git", relative_path="src/a.txt")

    result = run_cmd(cmd_open, link=link)

    assert result.success is True
    assert result.output["path"] == str(checkout / "src" / "a.txt")
    assert result.output["text"] == "beta"


def test_cmd_open_launches_editor(text_file):
    launcher = RecordingLauncher()
    result = run_cmd(cmd_open, link=encode_link(text_file, 4), launch=True, launcher=launcher)
    assert result.success is True
    assert launcher.calls == [(text_file, 3)]
    assert result.output["editor_command"] == ["editor", "+4", str(text_file)]


def test_cmd_open_editor_failure(text_file):
    launcher = RecordingLauncher(TargetNotFound("No editor configured"))
    result = run_cmd(cmd_open, link=encode_link(text_file, 4), launch=True, launcher=launcher)
    assert result.success is False
    assert result.output["errors"] == ["TargetNotFound: No editor configured"]


def test_cmd_open_malformed_link():
    result = run_cmd(cmd_open, link="not-a-link")
    assert result.success is False
    assert result.output["errors"][0].startswith("MalformedLink: ")
    assert result.output["path"] == ""
    assert result.output["line"] == 0
    assert result.output["line_index"] == -1
    assert result.result.startswith("Failed to open file: ")


def test_cmd_open_missing_target(tmp_path):
    missing = tmp_path / "gone.txt"
    result = run_cmd(cmd_open, link=encode_link(missing, 7))
    assert result.success is False
    assert result.output["errors"][0].startswith("TargetNotFound: File does not exist")
    assert result.output["path"] == str(missing)
    assert result.output["line"] == 7
    assert result.output["line_index"] == 6


def test_cmd_open_line_past_end(text_file):
    result = run_cmd(cmd_open, link=encode_link(text_file, 99))
    assert result.success is False
    assert "beyond the end" in result.output["errors"][0]


def test_cmd_open_custom_loader(text_file):
    class Loader:
        def load(self, path, line_index):
            raise TargetNotFound(f"refused {path.name}")

    result = run_cmd(cmd_open, link=encode_link(text_file, 1), loader=Loader())
    assert result.output["errors"] == ["TargetNotFound: refused notes.txt"]
