# Path: tests/unit/test_main.py
"""
Unit Tests for main.py

Tests the CLI entry point functionality including:
- Argument parsing
- Listing grades
- Filtered tree output (text and JSON)
- Exit codes
"""

import json
import os
from unittest.mock import patch

import pytest

from route_finder import __version__
from route_finder.config_loader import ConfigLoader
from route_finder.main import build_parser, initialize_system, main, print_banner, render
from route_finder.output.formatters import FormatterRegistry
from route_finder.process import RouteFinderSession


@pytest.fixture(autouse=True)
def quiet_logging():
    """Keep main() from replacing the test run's log handlers."""
    with patch('route_finder.main.setup_ipo_logging'):
        yield


@pytest.fixture
def cli_env(mock_env_vars, reset_singletons):
    """Test environment with a fresh ConfigLoader."""
    return mock_env_vars


class TestPrintBanner:
    """Test banner printing."""

    def test_print_banner_outputs_text(self, capsys):
        """print_banner should output the program name."""
        print_banner()

        assert 'ROUTE FINDER' in capsys.readouterr().err

    def test_banner_is_ascii_only(self, capsys):
        """Banner should contain only ASCII characters."""
        print_banner()

        for char in capsys.readouterr().err:
            assert ord(char) < 128, f"Non-ASCII character found: {char}"


class TestArgumentParsing:
    """Test command line argument parsing."""

    def test_defaults(self):
        """No arguments uses configured defaults."""
        args = build_parser().parse_args([])

        assert args.source is None
        assert args.grade == []
        assert args.format is None
        assert args.expand is None
        assert not args.expand_all

    def test_repeated_grades(self):
        """--grade may be repeated."""
        args = build_parser().parse_args(['routes.csv', '-g', '5.9', '--grade', '5.10a'])

        assert args.source == 'routes.csv'
        assert args.grade == ['5.9', '5.10a']

    def test_invalid_format_rejected(self):
        """Only known formats are accepted."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(['--format', 'xml'])

    def test_expand_options_are_exclusive(self):
        """--expand and --expand-all cannot be combined."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(['--expand', '1', '--expand-all'])

    def test_format_choices_come_from_registry(self):
        """Every registered formatter is selectable."""
        for name in FormatterRegistry.get_available():
            assert build_parser().parse_args(['--format', name]).format == name

    def test_version(self, capsys):
        """--version prints the package version and exits."""
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(['--version'])

        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestMainTextOutput:
    """Test the default text tree output."""

    def test_full_tree(self, cli_env, sample_csv_file, capsys):
        """A valid file prints the tree and exits 0."""
        exit_code = main([str(sample_csv_file), '--expand-all'])
        captured = capsys.readouterr()
        out = captured.out

        assert exit_code == 0
        assert '[OK] Loaded 5 routes' in captured.err
        assert 'Routes: 5' in out
        assert '- East Slab' in out

    def test_grade_filter(self, cli_env, sample_csv_file, capsys):
        """Selected grades narrow the tree."""
        exit_code = main([str(sample_csv_file), '-q', '-g', '5.9', '-g', '5.9+'])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert 'Routes: 2' in out
        assert 'Grades: 5.9, 5.9+' in out
        assert 'Indian Creek' not in out

    def test_unknown_grade_warns(self, cli_env, sample_csv_file, capsys):
        """Grades missing from the dataset produce a warning."""
        exit_code = main([str(sample_csv_file), '-g', '5.14d'])
        captured = capsys.readouterr()

        assert exit_code == 0
        assert '[WARN] Grade not in dataset: 5.14d' in captured.err
        assert 'No routes match the selected grades.' in captured.out

    def test_expand_option(self, cli_env, sample_csv_file, capsys):
        """--expand limits the expanded depth."""
        main([str(sample_csv_file), '-q', '--expand', '1'])
        out = capsys.readouterr().out

        assert 'The Dome (2 routes)' in out
        assert 'Boulder Canyon' not in out

    def test_quiet_suppresses_banner(self, cli_env, sample_csv_file, capsys):
        """--quiet prints only the tree."""
        main([str(sample_csv_file), '-q'])
        captured = capsys.readouterr()

        assert 'ROUTE FINDER' not in captured.err
        assert '[OK]' not in captured.err
        assert 'Routes: 5' in captured.out


class TestMainOtherModes:
    """Test grade listing, JSON and file output."""

    def test_list_grades(self, cli_env, sample_csv_file, capsys):
        """--list-grades prints the sorted vocabulary."""
        exit_code = main([str(sample_csv_file), '--list-grades'])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert '4 grades in 5 routes' in out
        assert out.index('05.10') < out.index('5.10a') < out.index('5.9+')
        assert 'Routes:' not in out

    def test_json_to_stdout(self, cli_env, sample_csv_file, capsys):
        """JSON output on stdout is valid JSON."""
        exit_code = main([str(sample_csv_file), '-q', '-f', 'json', '-g', '5.10a'])
        data = json.loads(capsys.readouterr().out)

        assert exit_code == 0
        assert data['selected_grades'] == ['5.10a']
        assert data['total_routes'] == 1

    def test_json_stdout_without_quiet(self, cli_env, sample_csv_file, capsys):
        """Banner and status lines stay off stdout, so the JSON still parses."""
        exit_code = main([str(sample_csv_file), '-f', 'json'])
        captured = capsys.readouterr()

        assert exit_code == 0
        assert json.loads(captured.out)['total_routes'] == 5
        assert 'ROUTE FINDER' in captured.err
        assert '[OK] Loaded 5 routes' in captured.err

    def test_output_file(self, cli_env, sample_csv_file, temp_dir, capsys):
        """--output writes the tree to disk."""
        target = temp_dir / 'tree.json'

        exit_code = main([str(sample_csv_file), '-f', 'json', '-o', str(target)])

        assert exit_code == 0
        assert json.loads(target.read_text(encoding='utf-8'))['total_routes'] == 5
        assert f'Tree written to {target}' in capsys.readouterr().err

    def test_configured_source(self, reset_singletons, sample_csv_file, capsys):
        """Without SOURCE the configured source is used."""
        env = {
            'ROUTE_FINDER_SOURCE': str(sample_csv_file),
            'ROUTE_FINDER_OUTPUT_FORMAT': 'json',
        }
        with patch.dict(os.environ, env, clear=False):
            exit_code = main(['-q'])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out)['total_routes'] == 5


class TestMainErrors:
    """Test failure exit codes."""

    def test_missing_file(self, cli_env, temp_dir, capsys):
        """An unreadable source exits 1."""
        exit_code = main([str(temp_dir / 'missing.csv')])

        assert exit_code == 1
        assert '[FAIL] Failed to read file' in capsys.readouterr().err

    def test_not_a_csv(self, cli_env, temp_dir, capsys):
        """Non-CSV files are refused."""
        path = temp_dir / 'routes.txt'
        path.write_text('x', encoding='utf-8')

        assert main([str(path)]) == 1
        assert 'Please upload a CSV file' in capsys.readouterr().err

    def test_malformed_csv(self, cli_env, temp_dir, capsys):
        """Parse errors exit 1 with the parse message."""
        path = temp_dir / 'bad.csv'
        path.write_text('Route,Location\nA,X\n', encoding='utf-8')

        assert main([str(path)]) == 1
        assert 'Failed to parse CSV' in capsys.readouterr().err

    def test_configuration_error(self, reset_singletons, sample_csv_file, capsys):
        """Invalid configuration exits 1."""
        with patch.dict(os.environ, {'ROUTE_FINDER_OUTPUT_FORMAT': 'xml'}, clear=False):
            exit_code = main([str(sample_csv_file)])

        assert exit_code == 1
        assert 'Configuration error' in capsys.readouterr().err

    def test_keyboard_interrupt(self, cli_env, sample_csv_file):
        """Ctrl-C exits 130."""
        with patch('route_finder.main.run', side_effect=KeyboardInterrupt):
            assert main([str(sample_csv_file)]) == 130

    def test_render_without_data(self, cli_env, capsys):
        """Rendering an empty session exits 1."""
        args = build_parser().parse_args(['-q'])

        assert render(RouteFinderSession(), ConfigLoader(), args) == 1
        assert '[FAIL] No route data loaded' in capsys.readouterr().err


class TestInitializeSystem:
    """Test logging setup from configuration."""

    def test_debug_forces_debug_level(self, reset_singletons):
        """DEBUG=true overrides the configured log level."""
        env = {'ROUTE_FINDER_DEBUG': 'true', 'ROUTE_FINDER_LOG_LEVEL': 'WARNING'}
        with patch.dict(os.environ, env, clear=False):
            with patch('route_finder.main.setup_ipo_logging') as setup:
                initialize_system()

        assert setup.call_args.kwargs['log_level'] == 'DEBUG'

    def test_configured_level_without_debug(self, reset_singletons):
        """Without DEBUG the configured level is used."""
        env = {'ROUTE_FINDER_DEBUG': 'false', 'ROUTE_FINDER_LOG_LEVEL': 'WARNING'}
        with patch.dict(os.environ, env, clear=False):
            with patch('route_finder.main.setup_ipo_logging') as setup:
                initialize_system()

        assert setup.call_args.kwargs['log_level'] == 'WARNING'
