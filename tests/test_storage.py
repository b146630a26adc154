import stat

import pytest

from notecli.config import Config, ConfigManager
from notecli.crypto import NONCE_SIZE, SALT_SIZE
from notecli.storage import NoteNotFoundError, Storage, StorageError

PASSWORD = "password"


@pytest.fixture
def notes_dir(tmp_path):
    return tmp_path / "notes"


@pytest.fixture
def storage(tmp_path, notes_dir):
    config = ConfigManager(tmp_path / "config.json")
    config.save(Config(notes_directory=str(notes_dir)))
    return Storage(config)


def test_reads_directory_from_config(storage, notes_dir):
    assert storage.dir_path == str(notes_dir)
    assert storage.is_initialized() is True


def test_save_and_load_round_trip(storage):
    storage.save_note("first", b"body text", PASSWORD)
    assert storage.load_note("first", PASSWORD) == b"body text"


def test_file_layout(storage):
    storage.save_note("layout", b"abc", PASSWORD)
    path = storage.file_path("layout")
    data = path.read_bytes()
    assert len(data) == SALT_SIZE + NONCE_SIZE + 3 + 16
    assert stat.S_IMODE(path.stat().st_mode) == 0o600


def test_fresh_salt_per_note(storage):
    storage.save_note("a", b"same", PASSWORD)
    storage.save_note("b", b"same", PASSWORD)
    salt_a = storage.file_path("a").read_bytes()[:SALT_SIZE]
    salt_b = storage.file_path("b").read_bytes()[:SALT_SIZE]
    assert salt_a != salt_b


def test_file_path_sanitizes_title(storage, notes_dir):
    assert storage.file_path("a b/c") == notes_dir / "a_b_c.enc"


def test_file_exists(storage):
    assert storage.file_exists("missing") is False
    storage.save_note("present", b"x", PASSWORD)
    assert storage.file_exists("present") is True


def test_load_missing_note(storage):
    with pytest.raises(NoteNotFoundError, match="note 'ghost' does not exist"):
        storage.load_note("ghost", PASSWORD)


def test_load_wrong_password(storage):
    storage.save_note("locked", b"x", PASSWORD)
    with pytest.raises(StorageError, match="incorrect password or corrupted file"):
        storage.load_note("locked", "secret")


def test_load_short_file(storage, notes_dir):
    notes_dir.mkdir()
    storage.file_path("short").write_bytes(b"\x00" * (SALT_SIZE - 1))
    with pytest.raises(StorageError, match="invalid file format"):
        storage.load_note("short", PASSWORD)


def test_load_salt_only_file_is_corrupt(storage, notes_dir):
    notes_dir.mkdir()
    storage.file_path("bare").write_bytes(b"\x00" * SALT_SIZE)
    with pytest.raises(StorageError, match="incorrect password or corrupted file"):
        storage.load_note("bare", PASSWORD)


def test_list_titles_sorted_and_filtered(storage, notes_dir):
    storage.save_note("zeta", b"z", PASSWORD)
    storage.save_note("alpha", b"a", PASSWORD)
    (notes_dir / "readme.txt").write_text("ignored")
    (notes_dir / "folder.enc").mkdir()
    assert storage.list_titles() == ["alpha", "zeta"]


def test_list_titles_creates_directory(storage, notes_dir):
    assert storage.list_titles() == []
    assert notes_dir.is_dir()


def test_delete_note(storage):
    storage.save_note("gone", b"x", PASSWORD)
    storage.delete_note("gone")
    assert storage.file_exists("gone") is False
    with pytest.raises(NoteNotFoundError):
        storage.delete_note("gone")


def test_corrupt_config_leaves_directory_unset(tmp_path):
    config = ConfigManager(tmp_path / "config.json")
    config.config_path.write_text("{broken")
    storage = Storage(config)
    assert storage.dir_path == ""
    assert storage.is_initialized() is True


def test_uninitialized_storage_runs_setup(tmp_path, monkeypatch):
    target = tmp_path / "fresh"
    config = ConfigManager(tmp_path / "config.json")
    storage = Storage(config)
    assert storage.is_initialized() is False
    monkeypatch.setattr("builtins.input", lambda prompt="": str(target))
    storage.save_note("new", b"content", PASSWORD)
    assert storage.dir_path == str(target)
    assert config.get_notes_directory() == str(target)
    assert storage.load_note("new", PASSWORD) == b"content"


def test_failed_setup_is_reported(tmp_path, monkeypatch):
    storage = Storage(ConfigManager(tmp_path / "config.json"))
    monkeypatch.setattr("builtins.input", lambda prompt="": "")
    with pytest.raises(StorageError, match="failed to create notes directory"):
        storage.save_note("new", b"content", PASSWORD)