"""Link generate API command.

CLI: linelink link generate <path> <line> [--copy] [--portable]
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from .._output_schemas.link import LinkGenerateOutput
from ..config.LinelinkConfig import LinelinkConfig
from ..errors import LinkError, describe_error
from ..host.ClipboardSink import ClipboardSink
from ..host.SystemClipboard import SystemClipboard
from ..repo.VersionControl import VersionControl
from ..StageResult import StageResult
from ._build_service import _build_service


def cmd_generate(
    path: str,
    line: int,
    copy: bool = False,
    portable: bool | None = None,
    vcs: VersionControl | None = None,
    clipboard: ClipboardSink | None = None,
) -> StageResult:
    """Generate a link to a line of a file.

    Args:
        path: File to link to.
        line: 1-based line number.
        copy: Copy the link to the clipboard.
        portable: Override ``link.portable`` from the configuration.
        vcs: Version-control port, git on the command line by default.
        clipboard: Clipboard sink, the platform clipboard by default.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        file_path = str(Path(path).expanduser().absolute()) if path else ""
        warnings: list[str] = []
        link = ""
        repository: dict[str, Any] = {}
        copied = False

        try:
            yield (0.1, "Loading configuration...")
            config: Any = LinelinkConfig.load()
            if portable is not None:
                config.link.portable = portable
            service = _build_service(config, vcs)

            yield (0.4, "Resolving repository...")
            link, info = service.generate_with_repository(path, line)
            repository = info.to_dict()
        except (LinkError, ValueError) as exc:
            yield (1.0, "Complete")
            result_obj.output = LinkGenerateOutput(
                errors=[describe_error(exc)],
                warnings=warnings,
                path=file_path,
                line=line,
                link="",
                repository={},
                copied=False,
            ).model_dump(mode="python")
            result_obj.result = f"Failed to generate link: {exc}"
            result_obj.success = False
            return

        if copy:
            yield (0.8, "Copying to clipboard...")
            sink = clipboard if clipboard is not None else SystemClipboard()
            try:
                sink.write(link)
                copied = True
            except OSError as exc:
                warnings.append(f"Clipboard unavailable: {exc}")

        yield (1.0, "Complete")
        result_obj.output = LinkGenerateOutput(
            errors=[],
            warnings=warnings,
            path=file_path,
            line=line,
            link=link,
            repository=repository,
            copied=copied,
        ).model_dump(mode="python")
        result_obj.result = f"Link copied to clipboard: {link}" if copied else f"Generated link: {link}"
        result_obj.success = True

    return StageResult(
        announce=f"Generating link for {path}:{line}...",
        progress_callback=do_work,
    )
