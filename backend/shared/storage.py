"""Storage abstraction for the saved current game.

A single slot holds the encoded text of the game in progress. Hosts load
it on start, save after every change, and clear it when a new game
begins. Files are written atomically with owner-only permissions (0o600)
inside an owner-only directory (0o700).
"""

import contextlib
import os
import tempfile
from pathlib import Path
from typing import Protocol

import structlog

logger = structlog.get_logger()

# Owner-only directory permissions for the save directory.
_SAVE_DIR_MODE = 0o700

# Owner-only file permissions for the save file.
_SAVE_FILE_MODE = 0o600


class GameStorage(Protocol):
    """Protocol for persisting the encoded current game."""

    def load(self) -> str | None: ...

    def save(self, content: str) -> None: ...

    def clear(self) -> None: ...


class MemoryGameStorage:
    """Keeps the saved game text in memory."""

    def __init__(self, content: str | None = None) -> None:
        self.content = content

    def load(self) -> str | None:
        return self.content

    def save(self, content: str) -> None:
        self.content = content

    def clear(self) -> None:
        self.content = None


class LocalGameStorage:
    """Writes the saved game to a single file on the local filesystem."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path).resolve()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> str | None:
        """Return the saved text, or None when nothing has been saved.

        Read failures on an existing file propagate as OSError, and bytes
        that are not UTF-8 as UnicodeDecodeError.
        """
        try:
            return self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def save(self, content: str) -> None:
        """Atomically replace the save file with content.

        Creates the directory lazily on first write with owner-only
        permissions (0o700). Writes via temp-file-then-rename so readers
        never see a partial file.
        """
        directory = self._path.parent
        directory.mkdir(mode=_SAVE_DIR_MODE, parents=True, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(dir=str(directory), suffix=".tmp", prefix=".game_")
        fd_owned = True
        try:
            with os.fdopen(fd, "wb") as f:
                fd_owned = False  # os.fdopen took ownership; it will close fd
                f.write(content.encode("utf-8"))
                f.flush()
                os.fsync(f.fileno())
            os.chmod(tmp_path, _SAVE_FILE_MODE)  # noqa: PTH101
            Path(tmp_path).replace(self._path)
        except BaseException:
            if fd_owned:
                with contextlib.suppress(OSError):
                    os.close(fd)
            with contextlib.suppress(OSError):
                Path(tmp_path).unlink()
            raise
        logger.debug("saved game", path=str(self._path))

    def clear(self) -> None:
        """Delete the save file if present."""
        self._path.unlink(missing_ok=True)
        logger.info("cleared saved game", path=str(self._path))
