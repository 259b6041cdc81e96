import logging
from .file_helpers import get_file_hash_or_none
from .models import Repository
from .snapshot_helpers import get_snapshot_dir

logger = logging.getLogger(__name__)


def get_changed_files(repo: Repository, tracked_files: list[str], last_snapshot_id: str | None) -> set[str]:
    if last_snapshot_id is None:
        return set(tracked_files)

    snapshot_dir = get_snapshot_dir(repo, last_snapshot_id)
    changed: set[str] = set()
    for filepath in tracked_files:
        current_hash = get_file_hash_or_none(repo.root / filepath)
        if current_hash is None:
            # missing from the working tree; the next snapshot copy fails on it
            logger.warning("Tracked file %s is missing from the working tree", filepath)
            changed.add(filepath)
            continue
        if current_hash != get_file_hash_or_none(snapshot_dir / filepath):
            changed.add(filepath)
    logger.debug("%d of %d tracked file(s) changed since %s", len(changed), len(tracked_files), last_snapshot_id)
    return changed
