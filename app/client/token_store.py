"""File-backed persistence for the client session token."""

from pathlib import Path

DEFAULT_TOKEN_PATH = Path.home() / ".suckdsa" / "token"


class TokenStore:
    """Keeps the bearer token across client restarts."""

    def __init__(self, path: Path | str = DEFAULT_TOKEN_PATH) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> str | None:
        """Return the saved token, or None when nothing usable is stored."""
        try:
            token = self._path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            return None
        return token or None

    def save(self, token: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(token, encoding="utf-8")
        self._path.chmod(0o600)

    def clear(self) -> None:
        self._path.unlink(missing_ok=True)
