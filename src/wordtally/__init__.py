"""Word counting with HTML table output."""

from .cli import main
from .config import CounterConfig, ReportConfig
from .counter import compare_case_insensitive, count_words, sort_keys
from .report import render_header, render_report, render_rows
from .runner import CountResult, count_file, read_lines, write_report
from .separators import DEFAULT_SEPARATORS, build_separator_set
from .tokenizer import Token, is_separator_token, iter_tokens, next_token

__all__ = [
    "DEFAULT_SEPARATORS",
    "build_separator_set",
    "Token",
    "next_token",
    "is_separator_token",
    "iter_tokens",
    "count_words",
    "compare_case_insensitive",
    "sort_keys",
    "render_header",
    "render_rows",
    "render_report",
    "CounterConfig",
    "ReportConfig",
    "CountResult",
    "read_lines",
    "write_report",
    "count_file",
    "main",
]
