"""HTML report rendering."""

import html
from collections.abc import Iterable, Mapping

TITLE_PREFIX = "Words Counted in "

CLOSING_TAGS = ["</table>", "</body>", "</html>"]


def render_header(in_file: str) -> list[str]:
    """Build the document lines up to and including the table heading row."""
    title = TITLE_PREFIX + html.escape(in_file, quote=False)
    return [
        "<html>",
        "<head>",
        f"<title>{title}</title>",
        "</head>",
        "<body>",
        f"<h2>{title}</h2>",
        "<hr />",
        '<table border="1">',
        "<tr>",
        "<th>Words</th>",
        "<th>Counts</th>",
        "</tr>",
    ]


def render_rows(sorted_words: Iterable[str], counts: Mapping[str, int]) -> list[str]:
    """Build one table row per word, in the order given. Words are HTML-escaped."""
    lines = []
    for word in sorted_words:
        cell = html.escape(word, quote=False)
        lines.extend(["<tr>", f"<td>{cell}</td>", f"<td>{counts[word]}</td>", "</tr>"])
    return lines


def render_report(
    in_file: str,
    sorted_words: Iterable[str],
    counts: Mapping[str, int],
    close_tags: bool = True,
) -> str:
    """Render the full word count report.

    Args:
        in_file: Input file name shown in the title and heading.
        sorted_words: Words in display order.
        counts: Occurrence count for every word in ``sorted_words``.
        close_tags: Close the table, body and html elements. When False the
            document ends after the last row.

    Returns:
        HTML text, one element per line, ending with a newline.
    """
    lines = render_header(in_file) + render_rows(sorted_words, counts)
    if close_tags:
        lines.extend(CLOSING_TAGS)
    return "\n".join(lines) + "\n"
