"""Word frequency counting and case-insensitive ordering."""

import logging
from collections import Counter
from collections.abc import Iterable, Mapping
from functools import cmp_to_key

from .separators import build_separator_set
from .tokenizer import is_separator_token, next_token

logger = logging.getLogger(__name__)


def count_words(
    lines: Iterable[str],
    separators: frozenset[str] | None = None,
) -> dict[str, int]:
    """Count occurrences of every word across all lines.

    Each line is split from position 0 with next_token; separator runs are
    dropped and every word increments its own case-sensitive entry.

    Args:
        lines: Lines of text. Trailing line breaks are ignored.
        separators: Separator set. Defaults to the built-in separators.

    Returns:
        Mapping of word to its number of occurrences (always >= 1).
    """
    if separators is None:
        separators = build_separator_set()

    counts: Counter[str] = Counter()
    line_count = 0
    for line in lines:
        line = line.rstrip("\r\n")
        line_count += 1
        position = 0
        while position < len(line):
            token = next_token(line, position, separators)
            position += len(token)
            if not is_separator_token(token, separators):
                counts[token] += 1

    logger.debug("Counted %d unique words over %d lines", len(counts), line_count)
    return dict(counts)


def compare_case_insensitive(a: str, b: str) -> int:
    """Order two strings ignoring case.

    Case is folded with str.lower() on each whole string. Strings equal
    ignoring case fall back to plain code-point order, so "CAT" sorts before
    "cat".

    Returns:
        Negative if ``a`` sorts first, positive if ``b`` does, 0 if equal.
    """
    a_folded, b_folded = a.lower(), b.lower()
    if a_folded != b_folded:
        return -1 if a_folded < b_folded else 1
    if a != b:
        return -1 if a < b else 1
    return 0


def sort_keys(counts: Mapping[str, int]) -> list[str]:
    """Return the words of ``counts`` in ascending case-insensitive order.

    An empty mapping yields an empty list.
    """
    return sorted(counts, key=cmp_to_key(compare_case_insensitive))
