"""Link open API command.

CLI: linelink link open [<link>] [--launch]
"""

from collections.abc import Iterator
from typing import Any

from .._output_schemas.link import LinkOpenOutput
from ..config.LinelinkConfig import LinelinkConfig
from ..errors import LinkError, describe_error
from ..host.DocumentLoader import DocumentLoader
from ..host.EditorLauncher import EditorLauncher
from ..host.FileDocumentLoader import FileDocumentLoader
from ..StageResult import StageResult
from ._build_service import _build_service
from .OpenTarget import OpenTarget


def cmd_open(
    link: str,
    launch: bool = False,
    loader: DocumentLoader | None = None,
    launcher: EditorLauncher | None = None,
) -> StageResult:
    """Resolve a link to a file and line, and show that line.

    Args:
        link: Link string to open.
        launch: Also start the configured editor at the target line.
        loader: Document loader, the local filesystem by default.
        launcher: Editor launcher, built from ``link.editor_command`` by default.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        target: OpenTarget | None = None
        editor_command: list[str] = []

        try:
            yield (0.1, "Loading configuration...")
            config: Any = LinelinkConfig.load()
            service = _build_service(config)

            yield (0.3, "Decoding link...")
            target = service.open(link)

            yield (0.6, f"Loading {target.target_path}...")
            doc_loader = loader if loader is not None else FileDocumentLoader(config.link.context_lines)
            view = doc_loader.load(target.target_path, target.line_index)

            if launch:
                yield (0.8, "Starting editor...")
                editor = launcher if launcher is not None else EditorLauncher(config.link.editor_command)
                editor_command = editor.launch(view.path, view.line_index)
        except (LinkError, ValueError) as exc:
            yield (1.0, "Complete")
            result_obj.output = LinkOpenOutput(
                errors=[describe_error(exc)],
                warnings=[],
                link=link,
                path=str(target.target_path) if target else "",
                line=target.line_index + 1 if target else 0,
                line_index=target.line_index if target else -1,
                text="",
                context_start=0,
                context=[],
                editor_command=[],
            ).model_dump(mode="python")
            result_obj.result = f"Failed to open file: {exc}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = LinkOpenOutput(
            errors=[],
            warnings=[],
            link=link,
            editor_command=editor_command,
            **view.to_dict(),
        ).model_dump(mode="python")
        result_obj.result = f"Opened {view.path} at line {view.line_index + 1}"
        result_obj.success = True

    return StageResult(
        announce="Opening link...",
        progress_callback=do_work,
    )
