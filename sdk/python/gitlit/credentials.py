"""
Bearer token storage for the GitLit SDK.

Tokens are keyed by endpoint identity (the normalized base URL) and kept one
file per identity under the per-user configuration directory. Every ``load``
reads the file again, so a logout made by another process is seen on the next
call.
"""

import os
import re
import sys
from pathlib import Path
from typing import Protocol

from gitlit.exceptions import CredentialStoreError

APP_QUALIFIER = "com"
APP_ORGANIZATION = "gitlit"
APP_NAME = "gitlit-cli"

TOKEN_SUFFIX = ".token"

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9]")


class CredentialStore(Protocol):
    """Durable mapping from endpoint identity to a single bearer token."""

    def load(self, identity: str) -> str | None:
        ...

    def save(self, identity: str, token: str) -> None:
        ...

    def delete(self, identity: str) -> None:
        ...


def default_config_dir() -> Path:
    """
    Get the per-application configuration directory.

    ``GITLIT_CONFIG_DIR`` wins when set. Otherwise the platform convention is
    used: ``%APPDATA%`` on Windows, ``~/Library/Application Support`` on macOS
    and ``$XDG_CONFIG_HOME`` (default ``~/.config``) elsewhere.

    Returns:
        Directory path (not created)
    """
    override = os.environ.get("GITLIT_CONFIG_DIR")
    if override:
        return Path(override).expanduser()

    if sys.platform == "win32":
        base = os.environ.get("APPDATA") or str(Path.home() / "AppData" / "Roaming")
        return Path(base) / APP_ORGANIZATION / APP_NAME / "config"

    if sys.platform == "darwin":
        return (
            Path.home()
            / "Library"
            / "Application Support"
            / f"{APP_QUALIFIER}.{APP_ORGANIZATION}.{APP_NAME}"
        )

    xdg = os.environ.get("XDG_CONFIG_HOME")
    base_dir = Path(xdg) if xdg else Path.home() / ".config"
    return base_dir / APP_NAME


def sanitize_identity(identity: str) -> str:
    """Replace every character that is not an ASCII letter or digit with ``_``.

    Distinct identities may map to the same name; that is accepted.
    """
    return _UNSAFE_CHARS.sub("_", identity)


class FileCredentialStore:
    """Credential store backed by one token file per identity."""

    def __init__(self, root: Path | str | None = None) -> None:
        """
        Initialize the store.

        Args:
            root: Directory holding token files (default: ``<config dir>/tokens``)
        """
        self.root = Path(root) if root is not None else default_config_dir() / "tokens"

    def token_path(self, identity: str) -> Path:
        return self.root / f"{sanitize_identity(identity)}{TOKEN_SUFFIX}"

    def load(self, identity: str) -> str | None:
        """
        Read the token cached for an identity.

        Returns:
            The stripped token, or None when no file exists or it is blank

        Raises:
            CredentialStoreError: If the file exists but cannot be read
        """
        path = self.token_path(identity)
        try:
            data = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as e:
            raise CredentialStoreError(f"cannot read {path}: {e}") from e

        token = data.strip()
        return token or None

    def save(self, identity: str, token: str) -> None:
        """
        Write a token for an identity, replacing any previous one.

        Raises:
            CredentialStoreError: If the directory or file cannot be written
        """
        path = self.token_path(identity)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(token, encoding="utf-8")
        except OSError as e:
            raise CredentialStoreError(f"cannot write {path}: {e}") from e

    def delete(self, identity: str) -> None:
        """
        Remove the token for an identity. A missing file is not an error.

        Raises:
            CredentialStoreError: If an existing file cannot be removed
        """
        path = self.token_path(identity)
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            raise CredentialStoreError(f"cannot remove {path}: {e}") from e
