"""Directory creation and simple delays."""

from __future__ import annotations

import os
import time


def directory_exists(path: str) -> bool:
    """True when ``path`` names an existing directory."""
    return os.path.isdir(path)


def make_path(path: str) -> bool:
    """Create ``path`` and any missing parents with mode 0755.

    Returns True when the directory exists afterwards, False otherwise.
    """
    try:
        os.mkdir(path, 0o755)
        return True
    except FileNotFoundError:
        parent, sep, _ = path.rpartition("/")
        if not sep:
            return False
        if not make_path(parent):
            return False
        try:
            os.mkdir(path, 0o755)
        except OSError:
            return False
        return True
    except FileExistsError:
        return directory_exists(path)
    except OSError:
        return False


def delay_ms(ms: float) -> None:
    """Sleep for ``ms`` milliseconds."""
    time.sleep(ms / 1000)