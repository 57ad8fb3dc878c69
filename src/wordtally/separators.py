"""Separator characters that delimit words."""

# Digits count as separators, so "a1b" holds the two words "a" and "b".
DEFAULT_SEPARATORS = "., ()-_?/!@#$%^&*\t1234567890:;[]{}+=~`><"


def build_separator_set(chars: str = DEFAULT_SEPARATORS) -> frozenset[str]:
    """Build the set of separator characters from a literal string.

    Args:
        chars: String whose characters are all separators. Repeated
            characters collapse into one entry.

    Returns:
        Immutable set of single-character strings.
    """
    return frozenset(chars)
