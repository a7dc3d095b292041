"""Keep dated copies of game saves, with fuzzy date recognition, directory listing and small image helpers."""

__version__ = "1.0.0"