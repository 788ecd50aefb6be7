"""Atomic in-place file replacement."""

import os
import shutil
import tempfile
from pathlib import Path


def write_atomic(path: Path, text: str, encoding: str = "utf-8") -> None:
    """Replace path's contents with text without leaving a partial file.

    The text goes to a temp file in the same directory, which is then
    renamed over the original. The original file mode is kept. Symlinks
    are followed, so the file they point to is replaced and the link
    itself is left alone.
    """
    path = Path(os.path.realpath(path))
    fd, tmp_name = tempfile.mkstemp(
        dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as tmp:
            tmp.write(text)
        if path.exists():
            shutil.copymode(path, tmp_name)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except FileNotFoundError:
            pass
        raise
