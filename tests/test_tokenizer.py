"""Tests for the line tokenizer and separator detection."""

import pytest

from pipegrid.tokenizer import is_separator_row, tokenize_line


class TestBasicSplitting:
    """Plain pipe splitting and trimming."""

    def test_bare_cells(self) -> None:
        assert tokenize_line("a | b | c") == ["a", "b", "c"]

    def test_outer_pipes(self) -> None:
        assert tokenize_line("| a | b |") == ["a", "b"]

    def test_cells_are_trimmed(self) -> None:
        assert tokenize_line("|   spaced out   |x|") == ["spaced out", "x"]

    def test_empty_line(self) -> None:
        assert tokenize_line("") == []

    def test_blank_cell_between_pipes_is_kept(self) -> None:
        """Whitespace between pipes is a real (empty) cell."""
        assert tokenize_line("|  | b |") == ["", "b"]

    def test_adjacent_pipes_emit_nothing(self) -> None:
        assert tokenize_line("||") == []
        assert tokenize_line("| a || b |") == ["a", "b"]

    def test_trailing_text_after_last_pipe(self) -> None:
        assert tokenize_line("| a | b") == ["a", "b"]

    def test_no_pipes(self) -> None:
        assert tokenize_line("just text") == ["just text"]


class TestNestedDelimiters:
    """Pipes inside brackets, quotes and code spans do not split."""

    def test_code_span(self) -> None:
        assert tokenize_line("a | `b|c` | d") == ["a", "`b|c`", "d"]

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("| [a|b] | c |", ["[a|b]", "c"]),
            ("| (a|b) | c |", ["(a|b)", "c"]),
            ("| {a|b} | c |", ["{a|b}", "c"]),
            ("| 'a|b' | c |", ["'a|b'", "c"]),
            ('| "a|b" | c |', ['"a|b"', "c"]),
        ],
    )
    def test_each_delimiter_kind(self, line: str, expected: list[str]) -> None:
        assert tokenize_line(line) == expected

    def test_link_with_pipe_alias(self) -> None:
        assert tokenize_line("| [[page|alias]] | x |") == ["[[page|alias]]", "x"]

    def test_kinds_do_not_nest(self) -> None:
        """Only the active kind's closer ends the context."""
        assert tokenize_line("| [a (b] | c) |") == ["[a (b]", "c)"]

    def test_stray_closer_is_text(self) -> None:
        assert tokenize_line("| a] | b) |") == ["a]", "b)"]

    def test_unbalanced_opener_swallows_rest(self) -> None:
        assert tokenize_line("| [a | b | c") == ["[a | b | c"]

    def test_unbalanced_quote_swallows_rest(self) -> None:
        assert tokenize_line("| don't | split |") == ["don't | split |"]


class TestCodeSpans:
    """Backtick runs open and close spans of matching length."""

    def test_double_backtick_span_holds_single_backtick(self) -> None:
        assert tokenize_line("| ``a`b|c`` | d |") == ["``a`b|c``", "d"]

    def test_single_span_closes_on_single_tick(self) -> None:
        assert tokenize_line("| `a` | `b` |") == ["`a`", "`b`"]

    def test_unclosed_double_span(self) -> None:
        assert tokenize_line("| ``a` | b |") == ["``a` | b |"]


class TestEscapes:
    """A backslash escapes a following backtick and nothing else."""

    def test_escaped_backtick_does_not_open_span(self) -> None:
        assert tokenize_line("| a \\` | b |") == ["a \\`", "b"]

    def test_backslash_before_pipe_still_splits(self) -> None:
        assert tokenize_line(r"| a \| b | c |") == ["a \\", "b", "c"]

    def test_backslash_before_quote_is_text(self) -> None:
        assert tokenize_line(r'| "a\" | c |') == [r'"a\"', "c"]

    def test_double_backslash_then_escaped_backtick(self) -> None:
        # Encoded form of the code span `C:\`
        line = r"| \`C:\\` | b | c |"
        assert tokenize_line(line) == [r"\`C:\\`", "b", "c"]

    def test_trailing_backslash(self) -> None:
        assert tokenize_line("| a \\") == ["a \\"]


class TestNestingPairsOverride:
    """Callers can narrow the set of nesting delimiters."""

    def test_no_pairs_splits_everywhere(self) -> None:
        assert tokenize_line("| `a|b` |", nesting_pairs=()) == ["`a", "b`"]

    def test_brackets_only(self) -> None:
        line = "| 'a|b' | [c|d] |"
        assert tokenize_line(line, nesting_pairs=[("[", "]")]) == ["'a", "b'", "[c|d]"]


class TestSeparatorRow:
    """Separator rows are all-hyphen token lists."""

    @pytest.mark.parametrize(
        "tokens",
        [[], ["---"], ["-"], ["---", "-----"]],
    )
    def test_separators(self, tokens: list[str]) -> None:
        assert is_separator_row(tokens) is True

    @pytest.mark.parametrize(
        "tokens",
        [[""], ["---", ""], [":---"], ["---:"], ["- -"], ["---", "a"]],
    )
    def test_non_separators(self, tokens: list[str]) -> None:
        assert is_separator_row(tokens) is False

    def test_tokenized_separator_line(self) -> None:
        assert is_separator_row(tokenize_line("| --- | --- |"))
