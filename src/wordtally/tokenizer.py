"""Splitting lines into words and separator runs."""

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Token:
    """A maximal run of either word or separator characters."""

    text: str
    is_separator: bool

    @property
    def is_word(self) -> bool:
        """True for a run of non-separator characters."""
        return not self.is_separator


def next_token(text: str, position: int, separators: frozenset[str]) -> str:
    """Return the word or separator run starting at ``position``.

    The kind of run is decided by ``text[position]``: the result extends
    forward while the following characters are of the same kind, so it is
    never empty and never mixes words with separators.

    Args:
        text: Line being scanned.
        position: Start index, ``0 <= position < len(text)``.
        separators: Set of separator characters.

    Returns:
        ``text[position:end]`` where ``end`` is the next boundary or ``len(text)``.

    Raises:
        ValueError: If ``position`` is outside the text.
    """
    if not 0 <= position < len(text):
        raise ValueError(f"Position {position} out of range for text of length {len(text)}")

    in_separator = text[position] in separators
    end = position + 1
    while end < len(text) and (text[end] in separators) == in_separator:
        end += 1
    return text[position:end]


def is_separator_token(token: str, separators: frozenset[str]) -> bool:
    """Check whether a token returned by next_token is a separator run."""
    return bool(token) and token[0] in separators


def iter_tokens(text: str, separators: frozenset[str]) -> Iterator[Token]:
    """Yield the tokens of a line in order, starting at position 0.

    Joining the ``text`` of every yielded token reproduces ``text``.
    """
    position = 0
    while position < len(text):
        token = next_token(text, position, separators)
        position += len(token)
        yield Token(token, is_separator_token(token, separators))
