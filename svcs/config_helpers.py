from .models import Repository


def get_username(repo: Repository) -> str | None:
    if not repo.config_path.exists():
        return None
    username = repo.config_path.read_text(encoding="utf-8").strip()
    return username or None


def set_username(repo: Repository, username: str) -> None:
    repo.config_path.parent.mkdir(parents=True, exist_ok=True)
    repo.config_path.write_text(username, encoding="utf-8")
