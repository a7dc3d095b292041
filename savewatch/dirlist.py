"""Directory listings with file details, optionally sorted."""

from __future__ import annotations

import errno
import os
import stat
from dataclasses import dataclass
from typing import Iterator

_PATH_MAX = 4096
_FILENAME_MAX = 256


@dataclass(frozen=True)
class DirEntry:
    """One entry of a directory listing."""

    path: str
    name: str
    is_dir: bool
    is_reg: bool

    @property
    def extension(self) -> str:
        """Text after the last period of the name, or an empty string."""
        _, period, ext = self.name.rpartition(".")
        return ext if period else ""


def _check_path(path: str) -> None:
    if not path:
        raise ValueError("path must not be empty")
    if len(path) >= _PATH_MAX:
        raise OSError(errno.ENAMETOOLONG, os.strerror(errno.ENAMETOOLONG), path)


def _list_names(path: str) -> list[str]:
    _check_path(path)
    try:
        names = os.listdir(path)
    except OSError as exc:
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path) from exc
    return [".", "..", *names]


def read_entry(directory: str, name: str) -> DirEntry:
    """Describe ``name`` inside ``directory``, following symbolic links."""
    if len(directory) + len(name) + 1 >= _PATH_MAX or len(name) >= _FILENAME_MAX:
        raise OSError(errno.ENAMETOOLONG, os.strerror(errno.ENAMETOOLONG), name)
    path = f"{directory}/{name}"
    mode = os.stat(path).st_mode
    return DirEntry(
        path=path,
        name=name,
        is_dir=stat.S_ISDIR(mode),
        is_reg=stat.S_ISREG(mode),
    )


def scan(path: str) -> Iterator[DirEntry]:
    """Yield the entries of ``path``, including ``.`` and ``..``, unsorted.

    The directory is opened at once, so a bad path raises here rather than
    on the first iteration.
    """
    names = _list_names(path)
    return (read_entry(path, name) for name in names)


def _split_path(path: str) -> tuple[str, str]:
    stripped = path.rstrip("/") or "/"
    if stripped == "/":
        return "/", "/"
    if "/" not in stripped:
        return ".", stripped
    parent, base = stripped.rsplit("/", 1)
    return parent.rstrip("/") or "/", base


def find_file(path: str) -> DirEntry:
    """Return the entry for a single file, found through its parent directory."""
    _check_path(path)
    parent, base = _split_path(path)
    for entry in scan(parent):
        if entry.name == base:
            return entry
    raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)


def _sort_key(entry: DirEntry) -> tuple[bool, bytes]:
    return (not entry.is_dir, os.fsencode(entry.name)[:_FILENAME_MAX])


class SortedDirectory:
    """A directory listing with directories first, then names in byte order."""

    def __init__(self, path: str) -> None:
        self.path = path
        self._entries: list[DirEntry] = []
        self._load(path)

    def _load(self, path: str) -> None:
        self.path = path
        self._entries = []
        self._entries = sorted(scan(path), key=_sort_key)

    def __len__(self) -> int:
        return len(self._entries)

    def __getitem__(self, index: int) -> DirEntry:
        return self._entries[index]

    def __iter__(self) -> Iterator[DirEntry]:
        return iter(self._entries)

    def open_subdir(self, index: int) -> "SortedDirectory":
        """Replace this listing with that of the subdirectory at ``index``."""
        entry = self._entries[index]
        if not entry.is_dir:
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), entry.path)
        self._entries = []
        self._load(entry.path)
        return self