"""Persistent user configuration: where encrypted notes are kept."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Callable, Optional, Union

CONFIG_FILE_NAME = ".note-cli-config.json"


def _write_private(path: Path, data: bytes) -> None:
    """Write ``data`` to ``path``, creating the file readable by the owner only."""
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
    with os.fdopen(fd, "wb") as handle:
        handle.write(data)


@dataclass
class Config:
    """Stored settings."""

    notes_directory: str = ""


class ConfigManager:
    """Reads and writes the JSON configuration file."""

    def __init__(self, config_path: Optional[Union[str, os.PathLike]] = None) -> None:
        if config_path is None:
            config_path = Path.home() / CONFIG_FILE_NAME
        self.config_path = Path(config_path)

    def load(self) -> Config:
        """Read the configuration file.

        Raises OSError if the file cannot be read and ValueError if it is not
        a valid configuration document.
        """
        data = json.loads(self.config_path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("invalid configuration: expected a JSON object")
        notes_directory = data.get("notes_directory")
        if notes_directory is None:
            notes_directory = ""
        if not isinstance(notes_directory, str):
            raise ValueError("invalid configuration: notes_directory must be a string")
        return Config(notes_directory=notes_directory)

    def save(self, config: Config) -> None:
        """Write the configuration as indented JSON, private to the owner."""
        text = json.dumps(asdict(config), indent=2)
        _write_private(self.config_path, text.encode("utf-8"))

    def exists(self) -> bool:
        """Whether the configuration file is present."""
        try:
            self.config_path.stat()
        except OSError:
            return False
        return True

    def get_notes_directory(self) -> str:
        """The configured notes directory."""
        return self.load().notes_directory

    def setup_notes_directory(self, input_func: Optional[Callable[[str], str]] = None) -> str:
        """Ask the user for a notes directory, create it and save it.

        Returns the chosen directory path.
        """
        if input_func is None:
            input_func = input

        print("\nFirst time setup - Please choose where to store your encrypted notes.")
        print("Examples: ~/Dropbox/, ~/Documents/notes/, ~/.my_notes/")

        try:
            line = input_func("Enter directory path: ")
        except EOFError as exc:
            raise ValueError("failed to read directory path: EOF") from exc

        tokens = line.split()
        if not tokens:
            raise ValueError("failed to read directory path: unexpected newline")
        if len(tokens) > 1:
            raise ValueError("failed to read directory path: expected newline")
        dir_path = tokens[0]

        if dir_path.startswith("~/"):
            dir_path = os.path.normpath(os.path.join(str(Path.home()), dir_path[2:]))

        try:
            os.makedirs(dir_path, mode=0o700, exist_ok=True)
        except OSError as exc:
            raise OSError(f"failed to create directory: {exc}") from exc

        try:
            self.save(Config(notes_directory=dir_path))
        except OSError as exc:
            raise OSError(f"failed to save config: {exc}") from exc

        print(f"Notes will be stored in: {dir_path}")
        return dir_path