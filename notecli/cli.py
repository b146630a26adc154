"""Command-line interface for storing and reading encrypted notes."""

from __future__ import annotations

import argparse
import getpass
import sys
from typing import List, Optional, Sequence

from notecli.notes import NotesManager
from notecli.storage import StorageError

HELP_TEXT = """Note CLI - Secure note-taking application

Usage:
  note -save -title "my_note" "Your note content"     Save a new note
  note -open -title "my_note"                         Open and read a note
  note -find "title"                                   Find notes by title
  note -list                                           List all note titles
  note -password                                       Show password info (deprecated)
  note -help                                           Show this help
  note -h                                              Show flag usage"""

_PROMPT = "Enter password: "

_ERRORS = (StorageError, OSError, ValueError)


def read_password(prompt: str) -> str:
    """Read a password from the terminal without echoing it."""
    return getpass.getpass(prompt)


def build_parser() -> argparse.ArgumentParser:
    """The argument parser for the ``note`` command."""
    parser = argparse.ArgumentParser(prog="note", add_help=False)
    parser.add_argument("-h", action="help", help="Show flag usage")
    parser.add_argument("-save", "--save", action="store_true", help="Save a new note")
    parser.add_argument("-open", "--open", action="store_true", help="Open and read a note")
    parser.add_argument(
        "-title",
        "--title",
        default="",
        help="Title for the note (required with --save or --open)",
    )
    parser.add_argument("-find", "--find", default="", help="Find notes by title")
    parser.add_argument("-list", "--list", action="store_true", help="List all note titles")
    parser.add_argument(
        "-password",
        "--password",
        action="store_true",
        help="Show password info (deprecated)",
    )
    parser.add_argument("-help", "--help", action="store_true", help="Show help")
    parser.add_argument("content", nargs="*", help="Note content")
    return parser


def _error(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def _print_titles(header: str, titles: List[str]) -> None:
    print(header)
    for title in titles:
        print(f"  - {title}")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the command and return its exit status."""
    args = build_parser().parse_args(argv)

    if args.help or not (args.list or args.save or args.find or args.password or args.open):
        print(HELP_TEXT)
        return 0

    notes = NotesManager()

    if args.password:
        print("Password management is not needed with the new title-based system.")
        print("Each note can use a different password.")
        return 0

    try:
        typed = read_password(_PROMPT)
    except (OSError, EOFError) as exc:
        return _error(f"Error reading password: {exc}")

    if args.save:
        if not args.title:
            return _error("Error: -title is required when using -save")
        if not args.content:
            print("Error: content is required when using -save", file=sys.stderr)
            print(
                'Usage: note -save -title "your_title" "your content here"',
                file=sys.stderr,
            )
            return 1
        try:
            notes.add_note(args.title, "\n".join(args.content), typed)
        except _ERRORS as exc:
            return _error(f"Error saving note: {exc}")
        print(f"Note saved successfully with title: {args.title}")

    elif args.open:
        if not args.title:
            return _error("Error: -title is required when using -open")
        try:
            content = notes.get_note_content(args.title, typed)
        except _ERRORS as exc:
            return _error(f"Error opening note: {exc}")
        print(f"Title: {args.title}")
        print(f"Content:\n{content}")

    elif args.find:
        try:
            results = notes.find_notes(args.find, typed)
        except _ERRORS as exc:
            return _error(f"Error searching notes: {exc}")
        if not results:
            print(f"No notes found with title containing: {args.find}")
        else:
            _print_titles(f"Found {len(results)} note(s) with matching title:", results)

    elif args.list:
        try:
            titles = notes.list_all_notes(typed)
        except _ERRORS as exc:
            return _error(f"Error listing notes: {exc}")
        if not titles:
            print("No notes found.")
        else:
            _print_titles(f"Available notes ({len(titles)}):", titles)

    return 0


if __name__ == "__main__":
    sys.exit(main())