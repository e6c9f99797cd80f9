"""Tests for character counting."""

import pytest

from writing_tools.analysis.counter import count_characters, count_file_characters
from writing_tools.errors import SourceReadError
from writing_tools.models.range import TextRange


class TestCountCharacters:
    """Test code-point counting on text chunks."""

    def test_empty(self):
        assert count_characters("") == 0

    def test_only_terminators(self):
        assert count_characters("\n\r\n\r") == 0

    def test_ascii(self):
        assert count_characters("hello world") == 11

    def test_multibyte_counts_once(self):
        assert count_characters("こんにちは") == 5
        assert count_characters("🍣🍺") == 2

    def test_line_breaks_excluded(self):
        assert count_characters("一行目\r\n二行目\n三") == 7

    def test_no_normalization(self):
        # "e" + combining acute accent stays two code points
        assert count_characters("e\u0301") == 2
        assert count_characters("  \t ") == 4

    def test_terminator_invariant(self):
        text = "「こんにちは」と彼は言った。"
        assert count_characters(text) == count_characters("\n" + text.replace("と", "\r\nと") + "\n\n")


class TestCountFileCharacters:
    """Test counting over files."""

    @pytest.fixture
    def manuscript(self, tmp_path):
        path = tmp_path / "novel.txt"
        lines = [f"第{i}行のテキスト" for i in range(1, 11)]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path, lines

    def test_whole_file(self, manuscript):
        path, lines = manuscript
        result = count_file_characters(path)
        assert result.characters == sum(len(line) for line in lines)
        assert result.lines == 10
        assert result.text_range is None

    def test_range_past_end_of_file(self, manuscript):
        path, lines = manuscript
        result = count_file_characters(path, TextRange(3, 100))
        assert result.lines == 8
        assert result.characters == sum(len(line) for line in lines[2:])

    def test_start_past_end_of_file(self, manuscript):
        path, _ = manuscript
        result = count_file_characters(path, TextRange(50, 60))
        assert result.lines == 0
        assert result.characters == 0

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")
        result = count_file_characters(path)
        assert result.characters == 0
        assert result.lines == 0

    def test_crlf_and_missing_final_newline(self, tmp_path):
        path = tmp_path / "mixed.txt"
        path.write_bytes("ab\r\ncd\r\nef".encode("utf-8"))
        result = count_file_characters(path)
        assert result.characters == 6
        assert result.lines == 3

    def test_lone_carriage_return_not_a_line_break(self, tmp_path):
        path = tmp_path / "cr.txt"
        path.write_bytes(b"ab\rcd\n")
        result = count_file_characters(path)
        assert result.characters == 4
        assert result.lines == 1

    def test_summaries(self, manuscript):
        path, _ = manuscript
        whole = count_file_characters(path)
        assert whole.summary() == f"{path}: {whole.characters}"
        ranged = count_file_characters(path, TextRange(2, 3))
        assert ranged.summary() == f"{path}:2-3 characters={ranged.characters} lines=2"

    def test_missing_file(self, tmp_path):
        with pytest.raises(SourceReadError, match="file not found"):
            count_file_characters(tmp_path / "nope.txt")

    def test_invalid_encoding_is_fatal(self, tmp_path):
        path = tmp_path / "latin1.txt"
        path.write_bytes("café\n".encode("latin-1"))
        with pytest.raises(SourceReadError):
            count_file_characters(path)
