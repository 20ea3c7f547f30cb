"""
# Chain-Tags: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core conversion logic.

Text is converted by a tag expression (see `TAG_EXPRESSION_SYNTAX_HELP` in `constants.py`),
e.g. `indent(4)(wrap(72))`, which wraps text to 72 characters and then indents it by 4 spaces.
"""

import re

from chaintags.authorities import TagAuthority


def extract_body_and_line_ending(text: str) -> tuple[str, str]:
    """
    Split text into its body and its final line ending (if any).

    Tags normalise line endings away, so the final line ending of a file is set aside before conversion
    and restored afterwards, lest it be numbered or wrapped as a line of its own.
    """
    match = re.fullmatch(
        pattern=r'''
            (?P<body> [\s\S]*? )
            (?P<line_ending> \r?\n )?
        ''',
        string=text,
        flags=re.VERBOSE,
    )

    body = match.group('body')
    line_ending = match.group('line_ending') or ''

    return body, line_ending


def transform_text(text: str, expression: str, verbose_mode_enabled: bool = False) -> str:
    """
    Convert text by the tag expression.
    """
    body, line_ending = extract_body_and_line_ending(text)

    tag_authority = TagAuthority(verbose_mode_enabled)
    tag_authority.legislate(expression)
    transformed_body = tag_authority.execute(body)

    return transformed_body + line_ending
