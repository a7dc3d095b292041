"""Edit distances between strings."""

from __future__ import annotations


def levenshtein_distance(s: str, t: str) -> int:
    """Return the Levenshtein distance between ``s`` and ``t``.

    Counts single-character insertions, deletions and substitutions.
    """
    if not s:
        return len(t)
    if not t:
        return len(s)
    previous = list(range(len(s) + 1))
    for j, t_char in enumerate(t, 1):
        current = [j]
        for i, s_char in enumerate(s, 1):
            substitution_cost = 0 if s_char == t_char else 1
            current.append(
                min(
                    previous[i] + 1,
                    current[i - 1] + 1,
                    previous[i - 1] + substitution_cost,
                )
            )
        previous = current
    return previous[-1]


def damerau_distance(source: str, target: str) -> int:
    """Return an edit distance that also accounts for transpositions.

    Transpositions are only considered once both strings have been read
    past their second character, following the Berghel-Roach extension of
    Ukkonen's dynamic-programming algorithm.
    """
    n, m = len(source), len(target)
    if n == 0:
        return m
    if m == 0:
        return n

    matrix = [[0] * (m + 1) for _ in range(n + 1)]
    for i, row in enumerate(matrix):
        row[0] = i
    matrix[0] = list(range(m + 1))

    for i, s_i in enumerate(source, 1):
        for j, t_j in enumerate(target, 1):
            cost = 0 if s_i == t_j else 1
            cell = min(
                matrix[i - 1][j] + 1,
                matrix[i][j - 1] + 1,
                matrix[i - 1][j - 1] + cost,
            )
            if i > 2 and j > 2:
                trans = matrix[i - 2][j - 2] + 1
                if source[i - 2] != t_j:
                    trans += 1
                if s_i != target[j - 2]:
                    trans += 1
                cell = min(cell, trans)
            matrix[i][j] = cell
    return matrix[n][m]