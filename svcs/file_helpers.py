from pathlib import Path
import hashlib
import shutil
from .errors import HashAlgorithmError
from .settings import HASH_ALGORITHM, HASH_CHUNK_SIZE


def new_hasher():
    try:
        return hashlib.new(HASH_ALGORITHM)
    except ValueError as e:
        raise HashAlgorithmError(f"hash algorithm '{HASH_ALGORITHM}' is unavailable: {e}") from e


def hash_bytes(data: bytes) -> str:
    hasher = new_hasher()
    hasher.update(data)
    return hasher.hexdigest()


def get_file_hash(filepath: Path) -> str:
    hasher = new_hasher()
    with open(filepath, "rb") as f:
        while chunk := f.read(HASH_CHUNK_SIZE):
            hasher.update(chunk)
    return hasher.hexdigest()


def get_file_hash_or_none(filepath: Path) -> str | None:
    if not filepath.is_file():
        return None
    return get_file_hash(filepath)


def copy_file(src: Path, dest: Path) -> None:
    dest.parent.mkdir(parents=True, exist_ok=True)
    with open(src, "rb") as f_in:
        with open(dest, "wb") as f_out:
            shutil.copyfileobj(f_in, f_out)
