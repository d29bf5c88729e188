"""Write generated grammar text to disk.

The destination is replaced as a whole: text goes to a temporary file in the
destination directory, which is then renamed over the destination. Readers
never observe a half-written grammar.

Python 3.13+.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

from quoterules.diagnostics import ErrorTemplate, GrammarWriteError

__all__ = ["write_grammar"]

logger = logging.getLogger(__name__)


def _file_mode(destination: Path) -> int:
    """Permission bits for the written file.

    An existing destination keeps its mode; a new file gets the default
    mode for regular files under the process umask.
    """
    try:
        return stat.S_IMODE(destination.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_grammar(text: str, path: str | os.PathLike[str]) -> Path:
    """Write grammar text to path, replacing any existing file.

    Parent directories are created as needed. The text is written as UTF-8
    exactly as given.

    Args:
        text: Rendered grammar
        path: Destination file

    Returns:
        Resolved destination path

    Raises:
        GrammarWriteError: If the directory or file cannot be written
    """
    destination = Path(path)
    data = text.encode("utf-8")
    tmp_name: str | None = None
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{destination.name}.", suffix=".tmp", dir=destination.parent
        )
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        # mkstemp creates owner-only files.
        os.chmod(tmp_name, _file_mode(destination))
        os.replace(tmp_name, destination)
        tmp_name = None
    except OSError as e:
        raise GrammarWriteError(
            ErrorTemplate.write_failed(str(destination), e.strerror or str(e)),
            path=str(destination),
        ) from e
    finally:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)

    logger.info("Wrote %d bytes to %s", len(data), destination)
    return destination.resolve()
