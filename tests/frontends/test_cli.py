"""Tests for the CLI frontend."""

import argparse
from io import StringIO
from unittest.mock import patch

import pytest

from lifegrid.core.cell import Cell
from lifegrid.frontends.cli import CLILife, create_parser, validate_args, main


def run_main(args):
    """Run main() with the given arguments, returning (exit_code, output)."""
    with patch("sys.argv", ["lifegrid-cli"] + args), patch("sys.stdout", new_callable=StringIO) as stdout:
        exit_code = main()
    return exit_code, stdout.getvalue()


class TestCLILife:
    """Test cases for the CLI runner."""

    def test_initialization(self):
        """Test CLI initialization."""
        cli = CLILife()
        assert len(cli.pattern_library.list_patterns()) > 0

    def test_create_universe_empty(self):
        """Test an unseeded universe is all dead."""
        universe = CLILife().create_universe(8, 6)
        assert (universe.width, universe.height) == (8, 6)
        assert universe.population == 0

    def test_create_universe_centers_pattern(self):
        """Test patterns are centered when no offset is given."""
        universe = CLILife().create_universe(11, 11, pattern="Glider")

        assert universe.population == 5
        assert universe.get_cell(4, 5) is Cell.ALIVE
        assert universe.get_cell(5, 6) is Cell.ALIVE
        assert universe.get_cell(6, 4) is Cell.ALIVE

    def test_create_universe_with_offset(self):
        """Test explicit pattern offsets."""
        universe = CLILife().create_universe(6, 6, pattern="Block", row=0, col=4)

        assert universe.get_cell(0, 4) is Cell.ALIVE
        assert universe.get_cell(1, 5) is Cell.ALIVE

    def test_create_universe_unknown_pattern(self):
        """Test unknown pattern names are rejected."""
        with pytest.raises(ValueError, match="not found"):
            CLILife().create_universe(6, 6, pattern="Nope")

    def test_run_prints_every_frame(self):
        """Test each generation is printed, including the initial one."""
        cli = CLILife()
        universe = cli.create_universe(5, 5)

        with patch("sys.stdout", new_callable=StringIO) as stdout:
            cli.run(universe, 3)

        output = stdout.getvalue()
        assert output.count("Generation") == 4
        assert "Generation 3:" in output
        assert universe.generation == 3

    def test_run_quiet(self):
        """Test quiet mode only prints the final frame."""
        cli = CLILife()
        universe = cli.create_universe(5, 5)

        with patch("sys.stdout", new_callable=StringIO) as stdout:
            cli.run(universe, 3, quiet=True)

        output = stdout.getvalue()
        assert output.count("Generation") == 1
        assert "Generation 3:" in output

    def test_list_patterns(self):
        """Test pattern listing."""
        with patch("sys.stdout", new_callable=StringIO) as stdout:
            CLILife().list_patterns()

        output = stdout.getvalue()
        assert "Available patterns:" in output
        assert "Glider: 3x3, 5 cells" in output
        assert "Oscillators:" in output


class TestArgumentParsing:
    """Test cases for argument parsing and validation."""

    def test_defaults(self):
        """Test default argument values."""
        args = create_parser().parse_args([])

        assert args.width == 40
        assert args.height == 40
        assert args.generations == 10
        assert args.pattern is None
        assert args.random is False
        assert args.quiet is False

    def test_short_options(self):
        """Test short option names."""
        args = create_parser().parse_args(["-W", "12", "-H", "8", "-g", "5", "-r", "-q", "-v"])

        assert (args.width, args.height, args.generations) == (12, 8, 5)
        assert args.random and args.quiet and args.verbose

    def test_validate_args_valid(self):
        """Test validation accepts sane values."""
        args = create_parser().parse_args(["-W", "5", "-H", "5", "-g", "0"])
        assert validate_args(args) is True

    def test_validate_args_invalid(self):
        """Test validation reports every problem."""
        args = argparse.Namespace(width=0, height=-1, generations=-1, row=-1, col=None)

        with patch("sys.stdout", new_callable=StringIO) as stdout:
            assert validate_args(args) is False

        output = stdout.getvalue()
        assert "Width must be positive" in output
        assert "Height must be positive" in output
        assert "Generations must be non-negative" in output
        assert "Row offset must be non-negative" in output


class TestMain:
    """Test cases for the CLI entry point."""

    def test_blinker_final_frame(self):
        """Test a blinker run prints the vertical phase after one tick."""
        exit_code, output = run_main(["-W", "5", "-H", "5", "--pattern", "Blinker", "--row", "0", "--col", "0", "-g", "1", "-q"])

        assert exit_code == 0
        assert "Generation 1:" in output
        expected = "◻◼◻◻◻\n" * 3 + "◻◻◻◻◻\n" * 2
        assert expected in output

    def test_list_patterns(self):
        """Test --list-patterns exits cleanly."""
        exit_code, output = run_main(["--list-patterns"])

        assert exit_code == 0
        assert "Glider" in output

    def test_invalid_arguments(self):
        """Test invalid arguments give exit code 1."""
        exit_code, output = run_main(["-W", "0"])

        assert exit_code == 1
        assert "Width must be positive" in output

    def test_unknown_pattern(self):
        """Test unknown patterns are reported with the available names."""
        exit_code, output = run_main(["--pattern", "Nope"])

        assert exit_code == 1
        assert "Pattern 'Nope' not found" in output
        assert "Available patterns:" in output

    def test_pattern_out_of_bounds(self):
        """Test a pattern offset past the edge is reported, not wrapped."""
        exit_code, output = run_main(["-W", "5", "-H", "5", "--pattern", "Block", "--row", "4"])

        assert exit_code == 1
        assert "out of bounds" in output

    def test_seed_is_reproducible(self):
        """Test the same seed gives the same run."""
        args = ["-W", "10", "-H", "10", "--random", "--seed", "123", "-g", "4"]

        first = run_main(args)
        second = run_main(args)

        assert first == second
        assert first[0] == 0

    def test_verbose(self):
        """Test verbose output includes population and timing."""
        exit_code, output = run_main(["-W", "6", "-H", "6", "--pattern", "Block", "-g", "2", "-v"])

        assert exit_code == 0
        assert "population 4" in output
        assert "Ran 2 generations" in output
