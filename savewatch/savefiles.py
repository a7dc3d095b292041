"""Watching a save-game folder and keeping dated copies of each save."""

from __future__ import annotations

import enum
import logging
import os
import re
import sys
from pathlib import Path
from typing import Callable, Iterable, Protocol, TextIO

from savewatch.paths import make_path
from savewatch.spellcheck import SpellCheck, join_strings

log = logging.getLogger(__name__)

_EARLIEST_DATE = "1444_11_11"
_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def create_date_value(dates: list[str]) -> int:
    """Combine year, month and day strings into one number."""
    result = 0
    for i, text in enumerate(dates):
        value = int(text)
        # Each position also adds the weights of the ones after it.
        if i == 0:
            result += value * 10000
        if i <= 1:
            result += value * 100
        if i <= 2:
            result += value
    return result


def date_to_int(text: str) -> int:
    """Turn ``YYYY_MM_DD`` into a number that orders dates correctly."""
    raw = text.encode("latin-1", "replace").ljust(10, b"\0")
    year = int.from_bytes(raw[0:4], "big")
    month = int.from_bytes(raw[5:7], "big")
    day = int.from_bytes(raw[8:10], "big")
    return (year << 32) | (month << 16) | day


def compare_date(first: str, second: str) -> int:
    """Positive when ``first`` is later than ``second``, zero when equal."""
    return date_to_int(first) - date_to_int(second)


def _stoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    return int(match.group())


def parse_resolution(text: str) -> tuple[int, int]:
    """Read ``x=`` and ``y=`` values from a settings file's text."""
    width = height = 0
    for word in text.split():
        pos = word.find("x=")
        if pos != -1:
            width = _stoi(word[pos + 2:])
            continue
        pos = word.find("y=")
        if pos != -1:
            height = _stoi(word[pos + 2:])
            break
    return width, height


def default_save_path() -> str:
    """The game's save-game folder for the current user."""
    home = Path.home()
    if sys.platform == "win32":
        return str(home / "Documents" / "Paradox Interactive" / "Europa Universalis IV" / "save games")
    return str(home) + "/.local/share/Paradox Interactive/Europa Universalis IV/save games"


class Action(enum.IntEnum):
    ADD = 1
    DELETE = 2
    MODIFIED = 3


class Listener(Protocol):
    def handle_file_action(self, directory: str, filename: str, action: Action) -> bool: ...


def _snapshot(path: str) -> dict[str, int]:
    with os.scandir(path) as entries:
        return {entry.name: entry.stat().st_mtime_ns for entry in entries}


class FileWatcher:
    """Poll directories and report added, deleted and modified files."""

    def __init__(self) -> None:
        self._watches: dict[int, tuple[str, Listener, dict[str, int]]] = {}
        self._next_id = 1

    def add_watch(self, path: str, listener: Listener) -> int:
        """Start watching ``path``; return the watch id."""
        if not os.path.isdir(path):
            raise FileNotFoundError(path)
        watch_id = self._next_id
        self._next_id += 1
        self._watches[watch_id] = (path, listener, _snapshot(path))
        return watch_id

    def update(self) -> None:
        """Check every watched directory once and dispatch the changes."""
        for watch_id, (path, listener, old) in list(self._watches.items()):
            try:
                new = _snapshot(path)
            except OSError:
                continue
            self._watches[watch_id] = (path, listener, new)
            for name in sorted(new.keys() - old.keys()):
                listener.handle_file_action(path, name, Action.ADD)
            for name in sorted(old.keys() - new.keys()):
                listener.handle_file_action(path, name, Action.DELETE)
            for name in sorted(old.keys() & new.keys()):
                if old[name] != new[name]:
                    listener.handle_file_action(path, name, Action.MODIFIED)


def _starts_with_digit(text: str) -> bool:
    return bool(text) and "0" <= text[0] <= "9"


class UpdateListener:
    """Copy each finished save to ``<name>/<name>.<n>.<date>.eu4``."""

    def __init__(
        self,
        watcher: FileWatcher,
        savefile_dirs: set[str],
        dirs_log: TextIO | None,
        spell_check: Callable[[str], list[str]],
        read_text: Callable[[], str],
    ) -> None:
        self.watcher = watcher
        self.savefile_dirs = savefile_dirs
        self.dirs_log = dirs_log
        self.spell_check = spell_check
        self.read_text = read_text
        self.current_savefile = ""
        self.current_date = ""
        self.last_date_value = 0
        self.subversion = 0

    def _detect_savefile(self, filename: str) -> None:
        stem = filename[:-4]
        count = sum(1 for word in stem.split("_") if _starts_with_digit(word))
        if count >= 2:
            dot = filename.find(".")
            self.current_savefile = filename if dot == -1 else filename[:dot]
        else:
            first_digit = next((i for i, ch in enumerate(filename) if "0" <= ch <= "9"), len(filename))
            self.current_savefile = filename if first_digit < 4 else filename[:first_digit - 4]
        log.info("Detected filename: %s", self.current_savefile)

    def handle_file_action(self, directory: str, filename: str, action: Action) -> bool:
        """React to a change; return True when a dated copy was written."""
        if not filename.endswith(".tmp"):
            return False
        if "autosave" not in filename:
            self._detect_savefile(filename)
        if action != Action.DELETE:
            return False

        actual_save = Path(directory) / (filename[:-4] + ".eu4")
        try:
            content = actual_save.read_bytes()
        except OSError:
            content = b""

        text = self.read_text()
        log.info("Detected text: %s", text)
        date = self.spell_check(text)
        if not date or not _starts_with_digit(date[-1]):
            return False
        self.current_date = join_strings(date, "_")

        date_value = date_to_int(self.current_date)
        if date_value < date_to_int(_EARLIEST_DATE):
            return False

        if self.last_date_value < date_value:
            self.subversion = 0
            if "autosave.tmp" in filename and not self.current_date.endswith("1"):
                self.current_date = self.current_date[:-1] + "1"
        elif self.last_date_value == date_value:
            self.subversion += 1
        self.last_date_value = date_value

        name = self.current_savefile
        folder = f"{directory}/{name}"
        if name not in self.savefile_dirs and not make_path(folder):
            self.savefile_dirs.add(name)
            if self.dirs_log is not None:
                self.dirs_log.write(name)
                self.dirs_log.flush()
            try:
                self.watcher.add_watch(folder, self)
            except FileNotFoundError:
                log.warning("cannot watch %s", folder)

        relative = f"{name}/{name}.{self.subversion}.{self.current_date}.eu4"
        try:
            Path(directory, relative).write_bytes(content)
        except OSError as exc:
            log.warning("could not write %s: %s", relative, exc)
        log.info("Created savefile: %s", relative)
        return True


def _words(path: str) -> Iterable[str]:
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read().split()
    except OSError:
        return []


class SavefileManager:
    """Watch the save folder and the per-savefile folders listed in a file."""

    def __init__(
        self,
        save_path: str | None = None,
        dirs_file: str = "../data/savefile_dirs.txt",
        spell_check: Callable[[str], list[str]] | None = None,
        read_text: Callable[[], str] | None = None,
    ) -> None:
        self.save_path = save_path if save_path is not None else default_save_path()
        try:
            settings = Path(self.save_path, "..", "settings.txt").read_text(encoding="utf-8", errors="replace")
            self.resolution = parse_resolution(settings)
        except OSError:
            self.resolution = (0, 0)
        log.info("%d, %d", *self.resolution)

        if spell_check is None:
            try:
                spell_check = SpellCheck.from_file("../data/dictionary.txt")
            except OSError:
                log.error("Couldn't open ../data/dictionary.txt for reading")
                spell_check = SpellCheck()
        if read_text is None:
            read_text = self._screen_reader()

        self.watcher = FileWatcher()
        self.savefile_dirs: set[str] = set()
        self._dirs_log: TextIO | None = None
        self.listener = UpdateListener(self.watcher, self.savefile_dirs, None, spell_check, read_text)
        self.watcher.add_watch(self.save_path, self.listener)
        for word in _words(dirs_file):
            self.watcher.add_watch(f"{self.save_path}/{word}", self.listener)
        try:
            self._dirs_log = open(dirs_file, "a", encoding="utf-8")
        except OSError:
            self._dirs_log = None
        self.listener.dirs_log = self._dirs_log

    def _screen_reader(self) -> Callable[[], str]:
        state: dict[str, object] = {}
        x = self.resolution[0] - 214

        def read() -> str:
            from savewatch.ocr import OCR
            from savewatch.screenshot import ScreenShot

            if not state:
                state["screen"] = ScreenShot(x, 16, 116, 19)
                state["ocr"] = OCR()
            return state["ocr"].recognize(state["screen"]())  # type: ignore[attr-defined]

        return read

    def update(self) -> None:
        """Process pending file changes once."""
        self.watcher.update()

    def close(self) -> None:
        if self._dirs_log is not None:
            self._dirs_log.close()
            self._dirs_log = None
            self.listener.dirs_log = None

    def __enter__(self) -> "SavefileManager":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()