"""Tests for wordtally.runner module."""

from pathlib import Path

import pytest

from wordtally.config import CounterConfig, ReportConfig
from wordtally.runner import count_file, read_lines, write_report


@pytest.fixture
def story_file(tmp_path: Path) -> Path:
    """Create a small input text file."""
    path = tmp_path / "story.txt"
    path.write_text("The cat sat. The CAT ran!\nThe end (1 of 2)\n")
    return path


class TestReadLines:
    """Tests for read_lines."""

    def test_strips_line_breaks(self, story_file: Path):
        """Test that lines come back without their line breaks."""
        assert read_lines(story_file) == ["The cat sat. The CAT ran!", "The end (1 of 2)"]

    def test_windows_line_endings(self, tmp_path: Path):
        """Test that CRLF endings are removed."""
        path = tmp_path / "crlf.txt"
        path.write_bytes(b"one\r\ntwo\r\n")

        assert read_lines(path) == ["one", "two"]

    def test_missing_file_raises(self, tmp_path: Path):
        """Test that a missing input propagates FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            read_lines(tmp_path / "missing.txt")


class TestWriteReport:
    """Tests for write_report."""

    def test_overwrites_existing_file(self, tmp_path: Path):
        """Test that the report replaces previous contents."""
        path = tmp_path / "out.html"
        path.write_text("old contents")

        write_report(path, "<html>\n")

        assert path.read_text() == "<html>\n"


class TestCountFile:
    """Tests for count_file."""

    def test_writes_report(self, story_file: Path, tmp_path: Path):
        """Test the end-to-end run."""
        output = tmp_path / "story.html"

        result = count_file(story_file, output)

        html = output.read_text()
        assert f"<title>Words Counted in {story_file}</title>" in html
        assert "<td>The</td>\n<td>3</td>" in html
        assert html.endswith("</table>\n</body>\n</html>\n")
        order = [html.index(f"<td>{w}</td>") for w in ["CAT", "cat", "end", "of", "ran", "sat", "The"]]
        assert order == sorted(order)

        assert result.output_path == output
        assert result.lines == 2
        assert result.total_words == 9
        assert result.unique_words == 7

    def test_empty_input(self, tmp_path: Path):
        """Test that an empty file produces a header and empty table."""
        empty = tmp_path / "empty.txt"
        empty.write_text("")
        output = tmp_path / "empty.html"

        result = count_file(empty, output)

        html = output.read_text()
        assert "<th>Words</th>" in html
        assert "<td>" not in html
        assert result.unique_words == 0
        assert result.total_words == 0

    def test_config_controls_tags_and_separators(self, story_file: Path, tmp_path: Path):
        """Test that config settings flow through to the report."""
        output = tmp_path / "story.html"
        config = CounterConfig(separators=" ", report=ReportConfig(close_tags=False))

        count_file(story_file, output, config)

        html = output.read_text()
        assert "<td>sat.</td>" in html
        assert "<td>(1</td>" in html
        assert "</table>" not in html

    def test_markup_in_words_is_escaped(self, tmp_path: Path):
        """Test that words kept whole by custom separators are escaped."""
        source = tmp_path / "markup.txt"
        source.write_text("a<b>c AT&T\n")
        output = tmp_path / "markup.html"

        count_file(source, output, CounterConfig(separators=" "))

        html = output.read_text()
        assert "<td>a&lt;b&gt;c</td>" in html
        assert "<td>AT&amp;T</td>" in html
        assert "<b>" not in html

    def test_missing_input_raises(self, tmp_path: Path):
        """Test that a missing input file is fatal."""
        with pytest.raises(FileNotFoundError):
            count_file(tmp_path / "missing.txt", tmp_path / "out.html")
