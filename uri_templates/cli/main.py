"""Main CLI entry point for uri-template."""

import argparse
import sys
from typing import Optional

from .commands import expand_template, list_variables


def _add_logging_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress non-error output'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default='warn',
        help='Set log level'
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the uri-template CLI."""
    parser = argparse.ArgumentParser(
        prog='uri-template',
        description='RFC 6570 URI Template expansion'
    )

    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Expand command
    expand_parser = subparsers.add_parser('expand', help='Expand a template')
    expand_parser.add_argument(
        'template',
        type=str,
        help='URI template, e.g. "/users/{id}{?fields*}"'
    )
    expand_parser.add_argument(
        '--var',
        action='append',
        metavar='NAME=VALUE',
        help='Scalar variable (can be specified multiple times)'
    )
    expand_parser.add_argument(
        '--list',
        action='append',
        metavar='NAME=A,B,C',
        help='List variable, items separated by commas (can be specified multiple times)'
    )
    expand_parser.add_argument(
        '--vars-file',
        type=str,
        help='Path to YAML or JSON file containing variables'
    )
    expand_parser.add_argument(
        '--strict',
        action='store_true',
        help='Fail when a referenced variable is undefined'
    )
    _add_logging_arguments(expand_parser)

    # Variables command
    variables_parser = subparsers.add_parser('variables', help='List variables used by a template')
    variables_parser.add_argument(
        'template',
        type=str,
        help='URI template'
    )
    _add_logging_arguments(variables_parser)

    return parser


def main(args: Optional[list] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'expand':
        return expand_template(parsed_args)
    elif parsed_args.command == 'variables':
        return list_variables(parsed_args)
    else:
        parser.print_help()
        return 1


if __name__ == '__main__':
    sys.exit(main())
