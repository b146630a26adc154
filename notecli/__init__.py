"""Password-encrypted notes stored one file per title, with a ``note`` command."""

__version__ = "0.1.0"
__all__ = ["__version__"]