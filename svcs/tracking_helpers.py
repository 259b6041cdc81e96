import logging
from pathlib import Path
from .errors import CorruptLogError, IOFailure, NotFoundError
from .models import Repository
from .repo_utils import to_repo_path

logger = logging.getLogger(__name__)


def get_tracked_files(repo: Repository) -> list[str]:
    if not repo.index_path.exists():
        return []
    try:
        lines = repo.index_path.read_text(encoding="utf-8").splitlines()
    except UnicodeDecodeError as e:
        raise CorruptLogError(f"{repo.index_path}: index is not valid UTF-8") from e
    except OSError as e:
        raise IOFailure(f"could not read {repo.index_path}: {e}") from e
    tracked: list[str] = []
    for line in lines:
        line = line.strip()
        if line and line not in tracked:
            tracked.append(line)
    return tracked


def add_tracked_file(repo: Repository, filepath: str | Path) -> bool:
    # relative paths are relative to the repository root, not the cwd
    path = Path(filepath)
    if not path.is_absolute():
        path = repo.root / path
    if not path.is_file():
        raise NotFoundError(f"Can't find '{filepath}'.")

    relative_path = to_repo_path(repo, path)
    if relative_path in get_tracked_files(repo):
        logger.debug("%s is already tracked", relative_path)
        return False

    repo.index_path.parent.mkdir(parents=True, exist_ok=True)
    with open(repo.index_path, "a", encoding="utf-8") as f:
        f.write(relative_path + "\n")
    logger.info("Tracking %s", relative_path)
    return True
