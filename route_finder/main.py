# Path: route_finder/main.py
"""
Route Finder - Main Entry Point

Browse a route-finder CSV export as a location tree, optionally
filtered by grade.

Data Flow:
    INPUT:   CSV file or URL -> typed route records
    PROCESS: grade vocabulary, grade filter, location tree
    OUTPUT:  text outline or JSON (stdout or file)

Usage:
    route-finder                          # Configured source, full tree
    route-finder routes.csv --list-grades # Show grade vocabulary
    route-finder routes.csv -g 5.9 -g 5.10a
    route-finder https://example.com/route-finder.csv --format json -o tree.json
"""

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from route_finder import __version__
from route_finder.config_loader import ConfigLoader
from route_finder.constants import (
    MENU_HEADER,
    OutputFormat,
    STATUS_FAIL,
    STATUS_INFO,
    STATUS_OK,
    STATUS_WARN,
)
from route_finder.core.logger import setup_ipo_logging, get_input_logger
from route_finder.loaders import RouteDataLoader
from route_finder.output.formatters import FormatterRegistry
from route_finder.process import RouteFinderSession


def print_banner() -> None:
    """Print application banner (stderr, stdout carries the tree)."""
    print(file=sys.stderr)
    print(MENU_HEADER, file=sys.stderr)
    print("  ROUTE FINDER", file=sys.stderr)
    print("  Climbing routes by location and grade", file=sys.stderr)
    print(MENU_HEADER, file=sys.stderr)
    print(file=sys.stderr)


def print_grades(session: RouteFinderSession) -> None:
    """
    Print the grade vocabulary of the loaded dataset.

    Args:
        session: Session with a loaded dataset
    """
    grades = session.available_grades
    if not grades:
        print(f"{STATUS_INFO} No graded routes found.")
        return

    print(f"{STATUS_OK} {len(grades)} grades in {len(session.routes)} routes:\n")
    for grade in grades:
        print(f"  {grade}")
    print()


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog='route-finder',
        description='route-finder - climbing routes by location and grade',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  route-finder routes.csv                 Full location tree
  route-finder routes.csv --list-grades   List available grades
  route-finder routes.csv -g 5.9 -g 5.10a Routes graded 5.9 OR 5.10a
  route-finder routes.csv -f json -o out.json
        """
    )

    parser.add_argument(
        'source',
        nargs='?',
        help='CSV file path or http(s) URL (default: ROUTE_FINDER_SOURCE)'
    )

    parser.add_argument(
        '--grade', '-g',
        action='append',
        default=[],
        metavar='GRADE',
        help='Show only routes of this grade (repeatable, OR-combined)'
    )

    parser.add_argument(
        '--list-grades', '-l',
        action='store_true',
        help='List the grades present in the dataset and exit'
    )

    parser.add_argument(
        '--format', '-f',
        choices=FormatterRegistry.get_available(),
        help='Output format (default: ROUTE_FINDER_OUTPUT_FORMAT)'
    )

    parser.add_argument(
        '--output', '-o',
        type=Path,
        help='Write the tree to this file instead of stdout'
    )

    parser.add_argument(
        '--unicode',
        action='store_true',
        help='Use Unicode box-drawing characters in text output'
    )

    expand = parser.add_mutually_exclusive_group()
    expand.add_argument(
        '--expand',
        type=int,
        metavar='N',
        help='Expand N levels of the text tree (default: ROUTE_FINDER_EXPAND_LEVELS)'
    )
    expand.add_argument(
        '--expand-all',
        action='store_true',
        help='Expand every level of the text tree'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress banner and status output'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )

    return parser


def initialize_system() -> ConfigLoader:
    """
    Initialize configuration and logging.

    Returns:
        ConfigLoader instance

    Raises:
        ValueError: If configuration is invalid
    """
    config = ConfigLoader()

    setup_ipo_logging(
        log_dir=config.get('log_dir'),
        log_level='DEBUG' if config.get('debug') else config.get('log_level', 'INFO'),
        console_output=config.get('log_console', True)
    )

    return config


def render(session: RouteFinderSession, config: ConfigLoader, args) -> int:
    """
    Render the session's tree to stdout or a file.

    Args:
        session: Session with a loaded dataset
        config: Configuration loader
        args: Parsed command line arguments

    Returns:
        Exit code
    """
    if not session.has_data:
        print(f"{STATUS_FAIL} No route data loaded", file=sys.stderr)
        return 1

    format_name = args.format or config.get('output_format', 'text')

    if format_name == OutputFormat.TEXT.value:
        if args.expand_all:
            expand_levels = None
        elif args.expand is not None:
            expand_levels = args.expand
        else:
            expand_levels = config.get('expand_levels')
        formatter = FormatterRegistry.get(
            format_name,
            use_unicode=args.unicode or config.get('unicode_tree', False),
            expand_levels=expand_levels,
        )
    else:
        formatter = FormatterRegistry.get(format_name, indent=config.get('json_indent', 2))

    if formatter is None:
        print(f"{STATUS_FAIL} Unknown output format: {format_name}", file=sys.stderr)
        return 1

    if args.output:
        path = formatter.write_tree(session.tree, args.output, session.selected_grades)
        if not args.quiet:
            print(f"{STATUS_OK} Tree written to {path}", file=sys.stderr)
    else:
        print(formatter.format_tree(session.tree, session.selected_grades))

    return 0


def run(args, config: ConfigLoader, logger) -> int:
    """
    Load the dataset, apply grade filters and render.

    Args:
        args: Parsed command line arguments
        config: Configuration loader
        logger: Logger instance

    Returns:
        Exit code (0 for success)
    """
    source = args.source or config.get('source')
    logger.info(f"Loading routes from {source}")

    session = RouteFinderSession(RouteDataLoader(config))
    result = session.load_source(source)

    if not result.success:
        print(f"\n{STATUS_FAIL} {result.error}", file=sys.stderr)
        return 1

    if not args.quiet:
        print(f"{STATUS_OK} Loaded {result.route_count} routes from {source}", file=sys.stderr)

    if args.list_grades:
        print_grades(session)
        return 0

    if args.grade:
        unknown = [g for g in args.grade if g not in result.grades]
        for grade in unknown:
            print(f"{STATUS_WARN} Grade not in dataset: {grade}", file=sys.stderr)
        session.select_grades(args.grade)
        if session.error:
            print(f"\n{STATUS_FAIL} {session.error}", file=sys.stderr)
            return 1

    return render(session, config, args)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for route_finder.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    args = build_parser().parse_args(argv)

    if not args.quiet:
        print_banner()

    try:
        config = initialize_system()
        logger = get_input_logger('main')
        return run(args, config, logger)

    except ValueError as e:
        print(f"\n{STATUS_FAIL} Configuration error: {e}", file=sys.stderr)
        return 1

    except KeyboardInterrupt:
        print("\n[Interrupted]", file=sys.stderr)
        return 130


if __name__ == '__main__':
    sys.exit(main())
