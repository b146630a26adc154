# notecli

notecli is a small command-line notebook. It keeps every note in its own
encrypted file. Each note is encrypted with AES-256-GCM. The key is derived from
your password with PBKDF2-HMAC-SHA256, using 100,000 iterations and a fresh
random 32-byte salt for every save. Each note can have its own password.

## Installation

```
pip install .
```

This installs the `note` command.

## First run

The first time you save, list or find notes, `note` asks where your encrypted
notes should go. Examples are `~/Dropbox/`, `~/Documents/notes/` and
`~/.my_notes/`.

The path must be a single word with no spaces. A leading `~/` is expanded to
your home directory. `note` creates the directory if it does not exist and
records it in `~/.note-cli-config.json` as `{"notes_directory": ...}`. That file
is readable by you only.

## Usage

Every command except `-help` and `-password` asks for a password first. The
password is not echoed. Each flag can be written with one dash or two, for
example `-save` or `--save`.

```
note -save -title "my_note" "Your note content"   Save a new note
note -open -title "my_note"                       Open and read a note
note -find "title"                                Find notes by title
note -list                                        List all note titles
note -password                                    Show password info (deprecated)
note -help                                        Show help
note -h                                           Show flag usage
```

Running `note` with no command prints the help text.

* `-save` stamps the note with the current local time, as
  `[YYYY-MM-DD HH:MM:SS]` on the first line. If you pass several content
  arguments, each becomes its own line. A note with the same title is
  overwritten.
* `-open` decrypts a note and prints it. A wrong password fails with
  "incorrect password or corrupted file".
* `-find` lists the titles that contain the search text. Case is ignored for
  ASCII letters.
* `-list` prints the titles of all stored notes in file-name order.

`-find` and `-list` ask for a password but do not use it. Titles are read from
file names and are not encrypted.

Slashes and spaces in a title become underscores in the file name. Each note is
stored as `<title>.enc` in your notes directory, and `-list` and `-find` show
titles in that form.

On success the exit status is 0. On any error it is 1, and a message is printed
to standard error.

## File format

Each `.enc` file is laid out in this order:

1. a 32-byte salt
2. a 12-byte nonce
3. the AES-GCM ciphertext with its 16-byte authentication tag

## Using it as a library

```python
from pathlib import Path

from notecli.config import ConfigManager
from notecli.notes import NotesManager
from notecli.storage import Storage

config = ConfigManager(Path("~/.note-cli-config.json").expanduser())
notes = NotesManager(Storage(config))

password = "password"
notes.add_note("shopping", "milk, eggs", password)
print(notes.get_note_content("shopping", password))
print(notes.find_notes("shop", password))
notes.delete_note("shopping", password)
```

The modules are:

* `notecli.config`: `Config` and `ConfigManager`, which load, save and set up
  the configuration file.
* `notecli.crypto`: `CryptoManager`, with `generate_salt`, `derive_key`,
  `encrypt` and `decrypt`. `decrypt` raises `ValueError` if the data is too
  short or fails authentication.
* `notecli.storage`: `Storage`, which saves, loads, lists and deletes note
  files. It raises `StorageError`, and `NoteNotFoundError` for a missing note.
* `notecli.notes`: `NotesManager` and `contains_ignore_case`.
* `notecli.cli`: `main(argv=None)`, which runs the command and returns its exit
  status.

## What it does not do

* The `note` command has no way to delete a note. Deleting is only available
  through `NotesManager.delete_note`, which first checks that the password opens
  the note.
* Notes cannot be edited or appended to. Saving again under the same title
  replaces the note.
* There is no command to change the notes directory after first-time setup. To
  change it, edit or remove `~/.note-cli-config.json`.