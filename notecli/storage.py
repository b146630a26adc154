"""Encrypted note files in the configured notes directory."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List, Optional

from notecli.config import ConfigManager
from notecli.crypto import SALT_SIZE, CryptoManager

NOTE_SUFFIX = ".enc"


class StorageError(Exception):
    """A note could not be stored or read."""


class NoteNotFoundError(StorageError):
    """The requested note does not exist."""


def _write_private(path: Path, data: bytes) -> None:
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)


class Storage:
    """Stores each note as ``salt || nonce || sealed data`` in its own file."""

    def __init__(
        self,
        config: Optional[ConfigManager] = None,
        crypto: Optional[CryptoManager] = None,
    ) -> None:
        self.config = config if config is not None else ConfigManager()
        self.crypto = crypto if crypto is not None else CryptoManager()
        self.dir_path = ""
        if self.config.exists():
            try:
                self.dir_path = self.config.get_notes_directory()
            except (OSError, ValueError):
                self.dir_path = ""

    def is_initialized(self) -> bool:
        """Whether a configuration file exists."""
        return self.config.exists()

    def ensure_initialized(self) -> None:
        """Run first-time setup if no notes directory is known."""
        if not self.dir_path:
            self.dir_path = self.config.setup_notes_directory()

    def _ensure_dir(self) -> None:
        self.ensure_initialized()
        os.makedirs(self.dir_path, mode=0o700, exist_ok=True)

    def file_path(self, title: str) -> Path:
        """The file that holds the note called ``title``."""
        safe_title = title.replace("/", "_").replace(" ", "_")
        return Path(self.dir_path) / f"{safe_title}{NOTE_SUFFIX}"

    def file_exists(self, title: str) -> bool:
        """Whether a note called ``title`` is stored."""
        try:
            self.file_path(title).stat()
        except OSError:
            return False
        return True

    def save_note(self, title: str, content: bytes, password: str) -> None:
        """Encrypt ``content`` with a fresh salt and write it under ``title``."""
        try:
            self._ensure_dir()
        except (OSError, ValueError) as exc:
            raise StorageError(f"failed to create notes directory: {exc}") from exc

        salt = self.crypto.generate_salt()
        encrypted = self.crypto.encrypt(content, password)
        _write_private(self.file_path(title), salt + encrypted)

    def load_note(self, title: str, password: str) -> bytes:
        """Read and decrypt the note called ``title``."""
        if not self.file_exists(title):
            raise NoteNotFoundError(f"note '{title}' does not exist")

        data = self.file_path(title).read_bytes()
        if len(data) < SALT_SIZE:
            raise StorageError("invalid file format")

        self.crypto.salt = data[:SALT_SIZE]
        try:
            return self.crypto.decrypt(data[SALT_SIZE:], password)
        except ValueError as exc:
            raise StorageError("incorrect password or corrupted file") from exc

    def list_titles(self) -> List[str]:
        """Titles of all stored notes, in file-name order."""
        self._ensure_dir()
        with os.scandir(self.dir_path) as entries:
            names = sorted(
                entry.name
                for entry in entries
                if not entry.is_dir(follow_symlinks=False)
                and entry.name.endswith(NOTE_SUFFIX)
            )
        return [name[: -len(NOTE_SUFFIX)] for name in names]

    def delete_note(self, title: str) -> None:
        """Remove the note called ``title``."""
        if not self.file_exists(title):
            raise NoteNotFoundError(f"note '{title}' does not exist")
        self.file_path(title).unlink()