"""Reading input, counting words and writing the report."""

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import DEFAULT_ENCODING, CounterConfig
from .counter import count_words, sort_keys
from .report import render_report

logger = logging.getLogger(__name__)


@dataclass
class CountResult:
    """Summary of a completed run."""

    input_path: Path
    output_path: Path
    lines: int
    total_words: int
    unique_words: int


def read_lines(path: Path, encoding: str = DEFAULT_ENCODING) -> list[str]:
    """Read every line of a text file, without line breaks."""
    with open(path, encoding=encoding) as f:
        lines = [line.rstrip("\n") for line in f]
    logger.debug("Read %d lines from %s", len(lines), path)
    return lines


def write_report(path: Path, content: str, encoding: str = DEFAULT_ENCODING) -> None:
    """Write the rendered report, replacing any existing file."""
    with open(path, "w", encoding=encoding) as f:
        f.write(content)
    logger.debug("Wrote report to %s", path)


def count_file(
    input_path: Path,
    output_path: Path,
    config: CounterConfig | None = None,
) -> CountResult:
    """Count the words of ``input_path`` and write the HTML report.

    The input file name appears in the report exactly as given.

    Raises:
        OSError: If the input cannot be read or the output cannot be written.
    """
    config = config or CounterConfig()

    lines = read_lines(input_path, config.encoding)
    counts = count_words(lines, config.separator_set())
    content = render_report(
        str(input_path),
        sort_keys(counts),
        counts,
        close_tags=config.report.close_tags,
    )
    write_report(output_path, content, config.encoding)

    return CountResult(
        input_path=input_path,
        output_path=output_path,
        lines=len(lines),
        total_words=sum(counts.values()),
        unique_words=len(counts),
    )
