"""
Tests for the command-line interface.
"""

import io

import pytest

from ..cli import main


@pytest.fixture
def universe_file(tmp_path, blinker_text):
    path = tmp_path / "blinker.txt"
    path.write_text(blinker_text + "\n", encoding="utf-8")
    return path


class TestStepCommand:
    """Tests for `lifegrid step`."""

    def test_step_once(self, universe_file, capsys):
        main(["step", str(universe_file)])

        assert capsys.readouterr().out == ".....\n.....\n.###.\n.....\n.....\n"

    def test_step_twice_returns_to_start(self, universe_file, blinker_text, capsys):
        main(["step", str(universe_file), "-n", "2"])

        assert capsys.readouterr().out == blinker_text + "\n"

    def test_step_all_prints_every_generation(self, universe_file, capsys):
        main(["step", str(universe_file), "-n", "2", "--all"])

        generations = capsys.readouterr().out.strip("\n").split("\n\n")
        assert len(generations) == 3

    def test_step_toroidal(self, tmp_path, capsys):
        path = tmp_path / "edge.txt"
        path.write_text(".#\n#.\n", encoding="utf-8")

        main(["step", str(path), "--toroidal"])

        assert capsys.readouterr().out == "..\n..\n"

    def test_step_from_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("##\n##\n"))

        main(["step", "-"])

        assert capsys.readouterr().out == "##\n##\n"


class TestErrors:
    """Tests for CLI error handling."""

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["step", str(tmp_path / "missing.txt")])

        assert exc_info.value.code == 1
        assert "File not found" in capsys.readouterr().err

    def test_invalid_universe(self, tmp_path, capsys):
        path = tmp_path / "bad.txt"
        path.write_text(".#\nX.\n", encoding="utf-8")

        with pytest.raises(SystemExit) as exc_info:
            main(["validate", str(path)])

        assert exc_info.value.code == 1
        assert "Invalid cell value 'X'" in capsys.readouterr().err

    def test_directory_path(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["step", str(tmp_path)])

        assert exc_info.value.code == 1
        assert "Error: Could not read" in capsys.readouterr().err

    def test_non_utf8_file(self, tmp_path, capsys):
        path = tmp_path / "latin1.txt"
        path.write_bytes(b".#\n\xe9.\n")

        with pytest.raises(SystemExit) as exc_info:
            main(["validate", str(path)])

        assert exc_info.value.code == 1
        assert "Error: Could not read" in capsys.readouterr().err

    def test_invalid_log_level(self, universe_file):
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "LOUD", "step", str(universe_file)])

        assert exc_info.value.code == 2

    def test_invalid_log_level_from_environment(self, universe_file, monkeypatch):
        monkeypatch.setenv("LIFEGRID_LOG_LEVEL", "LOUD")

        with pytest.raises(SystemExit) as exc_info:
            main(["step", str(universe_file)])

        assert exc_info.value.code == 2

    def test_log_level_is_case_insensitive(self, universe_file, capsys):
        main(["--log-level", "debug", "step", str(universe_file)])

        assert capsys.readouterr().out == ".....\n.....\n.###.\n.....\n.....\n"

    def test_no_command(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 1


class TestOtherCommands:
    """Tests for `random` and `validate`."""

    def test_random_is_reproducible(self, capsys):
        main(["random", "6", "4", "--seed", "7"])
        first = capsys.readouterr().out
        main(["random", "6", "4", "--seed", "7"])
        second = capsys.readouterr().out

        assert first == second
        assert len(first.splitlines()) == 4
        assert all(len(line) == 6 for line in first.splitlines())

    def test_validate(self, universe_file, capsys):
        main(["validate", str(universe_file)])

        assert "Valid universe: 5x5, 3 live cell(s)" in capsys.readouterr().out


class TestRandomDimensions:
    """Tests for `lifegrid random` size checks."""

    def test_one_zero_dimension_rejected(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["random", "0", "3"])

        assert exc_info.value.code == 1
        assert "both be zero" in capsys.readouterr().err

    def test_zero_by_zero_prints_nothing(self, capsys):
        main(["random", "0", "0"])

        assert capsys.readouterr().out == ""
