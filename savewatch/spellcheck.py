"""Correction of OCR-read in-game dates against a dictionary."""

from __future__ import annotations

import logging
from os import PathLike
from typing import Iterable, Sequence

from savewatch.bktree import BKTree
from savewatch.levenshtein import levenshtein_distance

log = logging.getLogger(__name__)

MONTHS = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
}

_SEARCH_LIMIT = 4
_NO_MATCH_DISTANCE = 8
_ACCEPT_BELOW = 6


def _is_digit(text: str) -> bool:
    """True when the first character of ``text`` is an ASCII digit."""
    return bool(text) and "0" <= text[0] <= "9"


def join_strings(parts: Iterable[str], delimiter: str = ",") -> str:
    """Join ``parts`` with ``delimiter`` between them."""
    return delimiter.join(parts)


def extract_ints(text: str) -> str:
    """Insert a space after the leading run of digits, e.g. ``12December``."""
    split_at = next(
        (i for i, ch in enumerate(text) if i != 0 and not _is_digit(ch)),
        len(text),
    )
    return text[:split_at] + " " + text[split_at:]


class SpellCheck:
    """Turn text such as ``"11 November 1444"`` into ``["1444", "11", "11"]``."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._tree: BKTree[str] = BKTree(levenshtein_distance)
        for word in words:
            self._tree.insert(word)
        if len(self._tree) >= 12:
            log.info("dictionary successfully loaded")
        self.months: dict[str, int] = dict(MONTHS)

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> "SpellCheck":
        """Build a checker from a whitespace-separated word file."""
        with open(path, encoding="utf-8") as handle:
            return cls(handle.read().split())

    def __len__(self) -> int:
        return len(self._tree)

    def __call__(self, text: str) -> list[str]:
        """Return the date as ``[year, month, day]`` strings.

        Returns an empty list for text of one character or less, and
        ``[""]`` when no four-character year can be found.
        """
        if len(text) <= 1:
            return []
        text = text.replace("\n", "")

        tokens = text.split(" ")
        if tokens and tokens[-1] == "":
            tokens.pop()

        result: list[str] = []
        results: list[tuple[str, int]] = []
        correct_word = ("", _NO_MATCH_DISTANCE)
        for word in tokens:
            if _is_digit(word):
                result.append(word if len(word) <= 4 else "00")
                continue
            results.extend(self._tree.find(word, _SEARCH_LIMIT))
            for candidate in results:
                if candidate[1] <= correct_word[1]:
                    correct_word = candidate
            result.append(word if correct_word[1] >= _ACCEPT_BELOW else correct_word[0])

        for word in result:
            log.debug("%s", word)

        if len(result) > 3:
            # Merge a stray trailing fragment with the year: "444 1" -> "1444".
            tail = result.pop()
            if len(tail) == 1 and tail != " ":
                result[-1] = tail + result[-1]
            elif len(tail) == 2 and len(result[-1]) != 4:
                result[-1] = tail + result[-1]

        if not result or len(result[-1]) != 4:
            return [""]
        result.reverse()

        return [self._numeric_month(word) for word in result]

    def _numeric_month(self, word: str) -> str:
        if len(word) >= 3 and not _is_digit(word):
            return str(self.months.setdefault(word, 0))
        return word

    def correct_all(self, texts: Sequence[str]) -> list[list[str]]:
        """Apply the checker to each text in turn."""
        return [self(text) for text in texts]