import logging
import os
from pathlib import Path
from typing import Union

from .exceptions import KeyFileError

logger = logging.getLogger(__name__)

KEY_FILE_MODE = 0o600


def export_key_to_file(data: bytes, path: Union[str, Path]) -> Path:
    """Write key bytes to `path`, readable and writable by the owner only."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, KEY_FILE_MODE)
        with os.fdopen(fd, "wb") as f:
            f.write(data)
        # os.open only applies the mode when it creates the file
        os.chmod(path, KEY_FILE_MODE)
    except OSError as exc:
        raise KeyFileError(f"Error exporting key to {path}: {exc}") from exc

    logger.debug("Wrote %d bytes to %s", len(data), path)
    return path


def import_key_from_file(path: Union[str, Path]) -> bytes:
    """Return the raw bytes of a key file. No parsing or decryption is done."""
    path = Path(path)
    try:
        with path.open("rb") as f:
            return f.read()
    except OSError as exc:
        raise KeyFileError(f"Error importing key from {path}: {exc}") from exc
