import hashlib
import logging
import secrets
import shutil
import time
from pathlib import Path
from .errors import IOFailure, NotFoundError, PreconditionError, SnapshotExistsError
from .file_helpers import copy_file
from .models import Repository
from .settings import TMP_SNAPSHOT_PREFIX

logger = logging.getLogger(__name__)


def get_snapshot_dir(repo: Repository, snapshot_id: str) -> Path:
    return repo.commits_dir / snapshot_id


def is_valid_snapshot_id(snapshot_id: str) -> bool:
    # ids name a single directory directly under commits/
    if not snapshot_id or snapshot_id in (".", ".."):
        return False
    if snapshot_id.startswith(TMP_SNAPSHOT_PREFIX):
        return False
    return "/" not in snapshot_id and "\\" not in snapshot_id and Path(snapshot_id).name == snapshot_id


def snapshot_exists(repo: Repository, snapshot_id: str) -> bool:
    if not is_valid_snapshot_id(snapshot_id):
        return False
    return get_snapshot_dir(repo, snapshot_id).is_dir()


def new_snapshot_id(log_length: int = 0) -> str:
    seed = f"{log_length}-{time.time_ns()}-{secrets.token_hex(16)}"
    return hashlib.sha256(seed.encode()).hexdigest()


def create_snapshot(repo: Repository, snapshot_id: str, file_paths: list[str]) -> Path:
    if not is_valid_snapshot_id(snapshot_id):
        raise PreconditionError(f"'{snapshot_id}' is not a valid snapshot id")
    snapshot_dir = get_snapshot_dir(repo, snapshot_id)
    if snapshot_dir.exists():
        raise SnapshotExistsError(f"snapshot {snapshot_id} already exists")

    # copies land in a temporary sibling and are renamed into place once complete
    tmp_dir = repo.commits_dir / f"{TMP_SNAPSHOT_PREFIX}{snapshot_id}"
    if tmp_dir.exists():
        shutil.rmtree(tmp_dir)
    try:
        tmp_dir.mkdir(parents=True)
        for filepath in file_paths:
            copy_file(repo.root / filepath, tmp_dir / filepath)
        tmp_dir.rename(snapshot_dir)
    except OSError as e:
        shutil.rmtree(tmp_dir, ignore_errors=True)
        raise IOFailure(f"could not create snapshot {snapshot_id}: {e}") from e
    logger.info("Created snapshot %s with %d file(s)", snapshot_id, len(file_paths))
    return snapshot_dir


def discard_snapshot(repo: Repository, snapshot_id: str) -> None:
    # only for a snapshot that never made it into the log
    shutil.rmtree(get_snapshot_dir(repo, snapshot_id), ignore_errors=True)
    logger.warning("Discarded unreferenced snapshot %s", snapshot_id)


def list_snapshot_files(repo: Repository, snapshot_id: str) -> list[str]:
    if not snapshot_exists(repo, snapshot_id):
        raise NotFoundError(f"snapshot {snapshot_id} does not exist")
    snapshot_dir = get_snapshot_dir(repo, snapshot_id)
    return sorted(
        item.relative_to(snapshot_dir).as_posix()
        for item in snapshot_dir.rglob("*")
        if item.is_file()
    )


def restore_snapshot(repo: Repository, snapshot_id: str) -> list[str]:
    """Copy every file of a snapshot over the working tree.

    Existing working-tree files are overwritten unconditionally: there is no
    merge and no conflict detection. Files that are not in the snapshot are
    left alone. The snapshot itself is only read.
    """
    snapshot_files = list_snapshot_files(repo, snapshot_id)
    snapshot_dir = get_snapshot_dir(repo, snapshot_id)
    restored: list[str] = []
    try:
        for filepath in snapshot_files:
            copy_file(snapshot_dir / filepath, repo.root / filepath)
            restored.append(filepath)
    except OSError as e:
        raise IOFailure(f"could not restore snapshot {snapshot_id} ({len(restored)} file(s) restored): {e}") from e
    logger.info("Restored %d file(s) from snapshot %s", len(restored), snapshot_id)
    return restored
