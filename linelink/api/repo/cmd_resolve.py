"""Repo resolve API command.

CLI: linelink repo resolve <path>
"""

from collections.abc import Iterator
from pathlib import Path
from typing import Any

from .._output_schemas.repo import RepoResolveOutput
from ..config.LinelinkConfig import LinelinkConfig
from ..errors import LinkError, describe_error
from ..StageResult import StageResult
from .GitCli import GitCli
from .RepositoryResolver import RepositoryResolver
from .VersionControl import VersionControl


def cmd_resolve(path: str, vcs: VersionControl | None = None) -> StageResult:
    """Show the repository context a file resolves to.

    Args:
        path: File to resolve.
        vcs: Version-control port, git on the command line by default.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        file_path = Path(path).expanduser().absolute()

        try:
            yield (0.2, "Loading configuration...")
            config: Any = LinelinkConfig.load()
            port = vcs if vcs is not None else GitCli(config.git.executable, config.git.timeout_secs)
            resolver = RepositoryResolver(port, config.workspace.folders)

            yield (0.5, "Querying version control...")
            info = resolver.resolve(file_path)
        except (LinkError, ValueError) as exc:
            yield (1.0, "Complete")
            result_obj.output = RepoResolveOutput(
                errors=[describe_error(exc)],
                warnings=[],
                path=str(file_path),
                kind="",
                identifier="",
                relative_path="",
            ).model_dump(mode="python")
            result_obj.result = f"Failed to resolve repository: {exc}"
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.output = RepoResolveOutput(
            errors=[],
            warnings=[],
            path=str(file_path),
            **info.to_dict(),
        ).model_dump(mode="python")
        result_obj.result = f"Resolved {info.describe()}"
        result_obj.success = True

    return StageResult(
        announce=f"Resolving repository for {path}...",
        progress_callback=do_work,
    )
