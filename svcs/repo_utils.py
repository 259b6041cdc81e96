import logging
from pathlib import Path
from .errors import PreconditionError
from .models import Repository
from .settings import VCS_DIR_NAME

logger = logging.getLogger(__name__)


def find_svcs_root_dir(start: Path | None = None) -> Path | None:
    start = start or Path.cwd()
    for directory in [start] + list(start.parents):
        if (directory / VCS_DIR_NAME).is_dir():
            return directory
        if directory == Path.home():    # won't look past home directory
            return None
    return None


def init_repository(root: Path) -> Repository:
    repo = Repository(root=root)
    if not repo.vcs_dir.is_dir():
        logger.info("Creating repository directory %s", repo.vcs_dir)
    repo.commits_dir.mkdir(parents=True, exist_ok=True)
    return repo


def open_repository(start: Path | None = None) -> Repository:
    start = start or Path.cwd()
    root = find_svcs_root_dir(start)
    return init_repository(root if root is not None else start)


def to_repo_path(repo: Repository, filepath: str | Path) -> str:
    path = Path(filepath)
    if not path.is_absolute():
        path = repo.root / path
    try:
        relative = path.resolve().relative_to(repo.root.resolve())
    except ValueError:
        raise PreconditionError(f"'{filepath}' is outside the repository at {repo.root}")
    if relative.parts and relative.parts[0] == VCS_DIR_NAME:
        raise PreconditionError(f"'{filepath}' is inside the repository directory")
    return relative.as_posix()
