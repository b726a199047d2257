"""Version command - returns linelink version information."""

import subprocess
from collections.abc import Iterator
from pathlib import Path

from ...utils.get_package_version import get_package_version
from .._output_schemas.config import ConfigVersionOutput
from ..StageResult import StageResult


def cmd_version() -> StageResult:
    """Get linelink version information."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Getting package version...")
        version = get_package_version()

        yield (0.6, "Checking git commit...")
        git_sha = ""
        project_root = Path(__file__).resolve().parents[3]
        try:
            sha_output = subprocess.run(
                ["git", "rev-parse", "--short", "HEAD"],
                cwd=project_root,
                capture_output=True,
                text=True,
                timeout=5,
            )
            if sha_output.returncode == 0:
                git_sha = sha_output.stdout.strip()
        except (OSError, subprocess.SubprocessError):
            # Installed without git or outside a checkout
            git_sha = ""

        yield (1.0, "Complete")
        full_version = f"{version} ({git_sha})" if git_sha else version

        result_obj.result = f"linelink version: {full_version}"
        result_obj.output = ConfigVersionOutput(
            errors=[],
            warnings=[],
            version=version,
            git_sha=git_sha,
            full_version=full_version,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Getting version information...",
        progress_callback=do_work,
    )
