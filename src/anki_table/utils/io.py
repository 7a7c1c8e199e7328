"""File I/O utilities for safe and atomic operations."""

import os
import tempfile
from collections.abc import Generator
from contextlib import contextmanager, suppress
from pathlib import Path
from typing import TextIO

from anki_table.utils.logging import get_logger

logger = get_logger(__name__)


@contextmanager
def atomic_write(
    path: str | Path,
    encoding: str = "utf-8",
    newline: str | None = "\n",
) -> Generator[TextIO, None, None]:
    """
    Context manager for atomic text file writing.

    Writes to a temporary file in the target directory, then renames it onto
    the target path once the block exits cleanly. The target is never left
    partially written, and it is not created at all when the block raises.

    Args:
        path: Target file path
        encoding: Text encoding (default: "utf-8")
        newline: Newline translation passed to open() (default: "\\n")

    Yields:
        Text file object opened for writing

    Example:
        with atomic_write("deck.html") as f:
            f.write(document)
    """
    path = Path(path)
    parent = path.parent
    parent.mkdir(parents=True, exist_ok=True)

    temp_fd, temp_path = tempfile.mkstemp(dir=parent, prefix=f".tmp_{path.name}_")
    os.close(temp_fd)
    temp_path_obj = Path(temp_path)

    try:
        with open(temp_path, "w", encoding=encoding, newline=newline) as f:
            yield f
            f.flush()
            os.fsync(f.fileno())

        temp_path_obj.replace(path)
    except BaseException as e:
        with suppress(OSError):
            temp_path_obj.unlink()
        if isinstance(e, OSError):
            logger.error("atomic_write_failed", path=str(path), error=str(e))
        raise
