"""
# Gitdown: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import sys
from typing import Optional

from gitdown._version import __version__
from gitdown.constants import COMMAND_LINE_ERROR_EXIT_CODE, GENERIC_ERROR_EXIT_CODE
from gitdown.core import expand_markdown, read_markdown_file, write_markdown_file
from gitdown.exceptions import ExpansionException
from gitdown.helpers import build_standard_helper_registry

DESCRIPTION = '''
    Expand Gitdown directives in a markdown document.
'''
INPUT_FILE_NAME_HELP = '''
    name of markdown file to be expanded
'''
OUTPUT_FILE_NAME_HELP = '''
    name of file to write the expanded document to
    (if omitted, the expanded document is printed to standard output)
'''
REPOSITORY_PATH_HELP = '''
    repository root against which helpers resolve file names
    (if omitted, located by walking up from the working directory to the nearest `.git`)
'''
MAX_ITERATIONS_HELP = '''
    fail if the document has not stopped changing after this many scan-and-resolve iterations
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every substitution applied)
'''


def positive_integer(argument: str) -> int:
    try:
        value = int(argument)
    except ValueError:
        raise argparse.ArgumentTypeError(f'invalid integer `{argument}`')

    if value < 1:
        raise argparse.ArgumentTypeError(f'must be at least 1 (got `{argument}`)')

    return value


def parse_command_line_arguments(arguments: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        '-m', '--max-iterations',
        dest='max_iterations',
        default=None,
        type=positive_integer,
        help=MAX_ITERATIONS_HELP,
        metavar='N',
    )
    argument_parser.add_argument(
        '-r', '--repository',
        dest='repository_path',
        default=None,
        help=REPOSITORY_PATH_HELP,
        metavar='DIR',
    )
    argument_parser.add_argument(
        '-o', '--output',
        dest='output_file_name',
        default=None,
        help=OUTPUT_FILE_NAME_HELP,
        metavar='output.md',
    )
    argument_parser.add_argument(
        'input_file_name',
        help=INPUT_FILE_NAME_HELP,
        metavar='file.md',
    )

    return argument_parser.parse_args(arguments)


def main(arguments: Optional[list[str]] = None):
    parsed_arguments = parse_command_line_arguments(arguments)
    input_file_name = parsed_arguments.input_file_name
    output_file_name = parsed_arguments.output_file_name

    try:
        markdown = read_markdown_file(input_file_name)
    except FileNotFoundError:
        print(f'error: argument `{input_file_name}`: file `{input_file_name}` not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
    except (OSError, UnicodeDecodeError) as read_error:
        print(f'error: argument `{input_file_name}`: cannot read `{input_file_name}` ({read_error})', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    helper_registry = build_standard_helper_registry(parsed_arguments.repository_path)
    try:
        markdown = expand_markdown(
            markdown,
            helper_registry,
            verbose_mode_enabled=parsed_arguments.verbose_mode_enabled,
            max_iterations=parsed_arguments.max_iterations,
        )
    except ExpansionException as expansion_exception:
        print(f'{expansion_exception} (in `{input_file_name}`)', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    if output_file_name is None:
        sys.stdout.write(markdown)
        return

    try:
        write_markdown_file(output_file_name, markdown)
        print(f'success: wrote to `{output_file_name}`')
    except IOError:
        print(f'error: cannot write to `{output_file_name}`', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)


if __name__ == '__main__':
    main()
