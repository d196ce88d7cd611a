"""On-disk bearer token storage for the terminal client."""

from pathlib import Path

from nexusblog.configs import ClientConfig


class TokenStore:
    """
    Keeps the signed-in user's JWT in a file between CLI invocations.

    Parameters
    ----------
    path : Path | None
        Token file location; defaults to `ClientConfig.token_file`.
    """

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or ClientConfig().token_file

    def load(self) -> str | None:
        if not self.path.is_file():
            return None
        token = self.path.read_text(encoding="utf-8").strip()
        return token or None

    def save(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(token, encoding="utf-8")
        self.path.chmod(0o600)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
