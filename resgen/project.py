"""File access for the project being generated into."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".dart_tool",
    ".idea",
    ".pub",
    ".pub-cache",
}

# Only skipped at the project root; nested "build" folders may hold assets.
_EXCLUDED_ROOT_DIRS = {"build"}


class ProjectFiles:
    """Reads and writes project files relative to a root directory.

    Every resolver in resgen receives file contents through this collaborator
    instead of touching the filesystem itself.
    """

    def __init__(self, root: Path | str) -> None:
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Project path not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Project path is not a directory: {root}")
        self.root = root_path

    def exists(self, relative: str) -> bool:
        return (self.root / relative).is_file()

    def read_text(self, relative: str) -> str:
        """Return the contents of ``relative``; raises ``FileNotFoundError``."""
        return (self.root / relative).read_text(encoding="utf-8")

    def read_optional(self, relative: str) -> str | None:
        if not self.exists(relative):
            return None
        return self.read_text(relative)

    def write_text(self, relative: str, content: str) -> Path:
        target = self.root / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return target

    def list_files(self) -> List[str]:
        """Return every project file as a sorted list of POSIX relative paths."""
        return sorted(self._iter_files())

    def _iter_files(self) -> Iterator[str]:
        for dirpath, dirnames, filenames in os.walk(self.root):
            current_dir = Path(dirpath)
            rel_dir = current_dir.relative_to(self.root).as_posix() if current_dir != self.root else ""

            excluded = _EXCLUDED_DIRS | _EXCLUDED_ROOT_DIRS if not rel_dir else _EXCLUDED_DIRS
            dirnames[:] = sorted(name for name in dirnames if name not in excluded)

            for filename in filenames:
                yield f"{rel_dir}/{filename}" if rel_dir else filename


__all__ = ["ProjectFiles"]
