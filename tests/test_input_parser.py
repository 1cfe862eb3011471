"""Tests for command-line token and burst file parsing."""

import pytest

from core.errors import InvalidInput
from utils.input_parser import InputParser


class TestTokens:

    def test_parse_bursts(self):
        assert InputParser.parse_bursts(["5", " 8", "0"]) == [5, 8, 0]

    def test_missing_bursts(self):
        with pytest.raises(InvalidInput, match="Missing"):
            InputParser.parse_bursts([])

    @pytest.mark.parametrize("token", ["abc", "2.5", "", "-1"])
    def test_bad_burst(self, token):
        with pytest.raises(InvalidInput):
            InputParser.parse_bursts(["3", token])

    def test_parse_quantum(self):
        assert InputParser.parse_quantum("4") == 4

    @pytest.mark.parametrize("token", ["0", "-3", "q"])
    def test_bad_quantum(self, token):
        with pytest.raises(InvalidInput):
            InputParser.parse_quantum(token)


class TestBurstFile:

    def test_parse_file_with_comments_and_separators(self, tmp_path):
        path = tmp_path / "bursts.txt"
        path.write_text("# workload\n\n5, 8\n2\n3 4\n", encoding="utf-8")
        assert InputParser.parse_file(str(path)) == [5, 8, 2, 3, 4]

    def test_bad_line_reports_line_number(self, tmp_path):
        path = tmp_path / "bursts.txt"
        path.write_text("5\nx\n", encoding="utf-8")
        with pytest.raises(InvalidInput, match=":2:"):
            InputParser.parse_file(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(InvalidInput, match="Cannot read"):
            InputParser.parse_file(str(tmp_path / "nope.txt"))

    def test_file_without_bursts(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("# nothing here\n", encoding="utf-8")
        with pytest.raises(InvalidInput, match="No burst times"):
            InputParser.parse_file(str(path))

    def test_save_then_load(self, tmp_path):
        path = str(tmp_path / "saved.txt")
        InputParser.save_bursts_to_file([4, 0, 9], path)
        assert InputParser.parse_file(path) == [4, 0, 9]


class TestRandomBursts:

    def test_seed_is_deterministic(self):
        first = InputParser.generate_random_bursts(8, max_burst=10, seed=3)
        second = InputParser.generate_random_bursts(8, max_burst=10, seed=3)
        assert first == second
        assert len(first) == 8
        assert all(1 <= b <= 10 for b in first)

    def test_rejects_non_positive_count(self):
        with pytest.raises(InvalidInput):
            InputParser.generate_random_bursts(0)
