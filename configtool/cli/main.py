"""Main CLI entry point for configtool."""

import argparse
import sys
from typing import Optional

from configtool import __version__
from .commands import apply_theme


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the configtool CLI."""
    parser = argparse.ArgumentParser(
        prog='configtool',
        description='Apply a theme (text substitution map) to configured files'
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    parser.add_argument(
        '--config-path',
        type=str,
        metavar='PATH',
        help='Config file to use instead of <config dir>/config.json'
    )
    parser.add_argument(
        '--theme-path',
        type=str,
        metavar='PATH',
        help='Theme file to use instead of the theme named in the config'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Log the loaded config, theme and each processed file'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose output'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='info',
        help='Set log level'
    )

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    return apply_theme(parsed_args)


if __name__ == '__main__':
    sys.exit(main())
