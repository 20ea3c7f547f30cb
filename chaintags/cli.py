"""
# Chain-Tags: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import sys
from typing import Optional

from chaintags._version import __version__
from chaintags.authorities import TagAuthority
from chaintags.constants import COMMAND_LINE_ERROR_EXIT_CODE, GENERIC_ERROR_EXIT_CODE, TAG_EXPRESSION_SYNTAX_HELP
from chaintags.core import transform_text
from chaintags.exceptions import (
    InvalidParameterException,
    TagExpressionSyntaxException,
    TerminalEncodingException,
    UnrecognisedSchemeException,
    UnrecognisedTagException,
)

DESCRIPTION = '''
    Transform text with a chain of tags (indentation, paragraphs, wrapping, line numbering).
'''
EPILOG = TAG_EXPRESSION_SYNTAX_HELP
EXPRESSION_HELP = '''
    tag expression to apply, e.g. `indent(4)(wrap(72))`
'''
FILE_NAME_HELP = '''
    name of text file to be transformed (standard input if omitted)
'''
LIST_MODE_HELP = '''
    list the available tags and numbering schemes
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every tag applied)
'''


def parse_command_line_arguments(arguments: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-l', '--list',
        dest='list_mode_enabled',
        action='store_true',
        help=LIST_MODE_HELP,
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'expression',
        default=None,
        help=EXPRESSION_HELP,
        metavar='EXPRESSION',
        nargs='?',
    )
    argument_parser.add_argument(
        'file_names',
        default=[],
        help=FILE_NAME_HELP,
        metavar='file.txt',
        nargs='*',
    )

    return argument_parser.parse_args(arguments)


def build_listing() -> str:
    tag_lines = '\n'.join(f'  {tag_description}' for tag_description in TagAuthority.describe_tags())
    scheme_lines = '\n'.join(f'  {scheme_name}' for scheme_name in TagAuthority.describe_numbering_schemes())

    return f'Tags:\n{tag_lines}\nNumbering schemes:\n{scheme_lines}'


def build_syntax_error_message(expression: str, syntax_exception: TagExpressionSyntaxException) -> str:
    caret_line = ' ' * syntax_exception.position + '^'
    return f'error: invalid expression: {syntax_exception}\n  {expression}\n  {caret_line}'


def read_text(file_name: Optional[str]) -> str:
    if file_name is None:
        return sys.stdin.read()

    try:
        with open(file_name, 'r', encoding='utf-8') as text_file:
            return text_file.read()
    except FileNotFoundError:
        print(f'error: argument `{file_name}`: file not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)


def transform_file(file_name: Optional[str], expression: str, verbose_mode_enabled: bool):
    text = read_text(file_name)

    try:
        transformed_text = transform_text(text, expression, verbose_mode_enabled)
    except TagExpressionSyntaxException as syntax_exception:
        print(build_syntax_error_message(expression, syntax_exception), file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
    except (InvalidParameterException, UnrecognisedSchemeException, UnrecognisedTagException) as exception:
        print(f'error: invalid expression: {exception}', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
    except TerminalEncodingException as terminal_encoding_exception:
        print(f'error: {terminal_encoding_exception}', file=sys.stderr)
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    sys.stdout.write(transformed_text)


def main(arguments: Optional[list[str]] = None):
    parsed_arguments = parse_command_line_arguments(arguments)
    expression = parsed_arguments.expression
    file_names = parsed_arguments.file_names
    list_mode_enabled = parsed_arguments.list_mode_enabled
    verbose_mode_enabled = parsed_arguments.verbose_mode_enabled

    if list_mode_enabled:
        if expression is not None:
            print('error: option -l (or --list) cannot be used with positional argument', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

        print(build_listing())
        return

    if expression is None:
        print('error: the following argument is required: EXPRESSION', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    if len(file_names) == 0:
        transform_file(None, expression, verbose_mode_enabled)
    else:
        for file_name in file_names:
            transform_file(file_name, expression, verbose_mode_enabled)


if __name__ == '__main__':
    main()
