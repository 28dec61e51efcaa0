"""sitegen/loader.py - reading a whole file into memory."""

from __future__ import annotations

import os
from pathlib import Path

from markup.errors import ReadShortfall, SourceNotFound


def load(path: str | Path) -> bytes:
    """
    Return the full contents of `path`.

    Raises SourceNotFound when the file cannot be opened and ReadShortfall
    when fewer bytes arrive than the size reported for it.
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise SourceNotFound(str(path), e.strerror or "") from e

    with f:
        size = os.fstat(f.fileno()).st_size
        try:
            data = f.read(size)
        except OSError as e:
            raise ReadShortfall(str(path), size, 0) from e

    if len(data) != size:
        raise ReadShortfall(str(path), size, len(data))
    return data
