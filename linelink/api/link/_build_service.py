from ..config.LinelinkConfig import LinelinkConfig
from ..repo.GitCli import GitCli
from ..repo.RepositoryResolver import RepositoryResolver
from ..repo.VersionControl import VersionControl
from .LinkService import LinkService


def _build_service(config: LinelinkConfig, vcs: VersionControl | None = None) -> LinkService:
    """Wire a LinkService from configuration, defaulting to git on the command line."""
    if vcs is None:
        vcs = GitCli(executable=config.git.executable, timeout_secs=config.git.timeout_secs)
    resolver = RepositoryResolver(vcs, config.workspace.folders)
    return LinkService(
        resolver,
        scheme=config.link.scheme,
        portable=config.link.portable,
        checkouts=config.link.checkouts,
    )
