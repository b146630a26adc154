"""High-level note operations built on encrypted storage."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from notecli.storage import Storage

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def contains_ignore_case(s: str, substr: str) -> bool:
    """Whether ``substr`` occurs in ``s``, ignoring the case of ASCII letters."""
    return _ascii_lower(substr) in _ascii_lower(s)


class NotesManager:
    """Adds, finds, reads and deletes password-protected notes."""

    def __init__(self, storage: Optional[Storage] = None) -> None:
        self.storage = storage if storage is not None else Storage()

    def is_initialized(self) -> bool:
        """Whether the notes directory has been configured."""
        return self.storage.is_initialized()

    def add_note(self, title: str, note: str, password: str) -> None:
        """Store ``note`` under ``title``, prefixed with the current time."""
        timestamp = datetime.now().strftime(TIMESTAMP_FORMAT)
        content = f"[{timestamp}]\n{note}"
        self.storage.save_note(title, content.encode("utf-8"), password)

    def find_notes(self, title_search: str, password: str) -> List[str]:
        """Titles that contain ``title_search``, ignoring case."""
        return [
            title
            for title in self.storage.list_titles()
            if contains_ignore_case(title, title_search)
        ]

    def list_all_notes(self, password: str) -> List[str]:
        """All stored note titles."""
        return self.storage.list_titles()

    def get_note_content(self, title: str, password: str) -> str:
        """The decrypted text of the note called ``title``."""
        return self.storage.load_note(title, password).decode("utf-8", errors="replace")

    def delete_note(self, title: str, password: str) -> None:
        """Delete a note after checking that ``password`` opens it."""
        self.storage.load_note(title, password)
        self.storage.delete_note(title)