"""
# Chain-Tags: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions, chiefly the line model shared by every line-oriented tag.
"""

import math
import re
from typing import Union


def split_into_lines(text: str) -> list[str]:
    """
    Split text into normalised lines.

    Each line has its trailing whitespace removed,
    and every run of whitespace following a non-whitespace character folded into a single space.
    Leading whitespace is kept verbatim, since indentation analysis depends on it.
    Blank lines are collapsed so that at most one blank line separates two non-blank lines;
    a leading blank line is kept once.
    """
    source_lines = [
        re.sub(pattern=r'(\S) \s+', repl=r'\1 ', string=line.rstrip(), flags=re.VERBOSE)
        for line in text.split('\n')
    ]

    lines: list[str] = []
    for index, line in enumerate(source_lines):
        if line or index == 0 or source_lines[index - 1]:
            lines.append(line)

    return lines


def is_blank(line: str) -> bool:
    return line.strip() == ''


def compute_indentation(line: str) -> int:
    """
    Count the leading whitespace characters of a line.
    """
    return len(line) - len(line.lstrip())


def compute_minimum_indentation(lines: list[str]) -> Union[int, float]:
    """
    Compute the minimum indentation, in space characters, of the non-blank lines.

    Returns `math.inf` if there are no non-blank lines.
    """
    return min(
        (
            len(line) - len(line.lstrip(' '))
            for line in lines
            if not is_blank(line)
        ),
        default=math.inf,
    )


def pad_start(string: str, width: int, padding: str) -> str:
    """
    Left-pad a string to a given width.

    Multi-character padding is repeated and truncated to fit, so `pad_start('7', 4, 'ab')` is `'aba7'`.
    Strings already at least as wide, and empty padding, are returned unchanged.
    """
    fill_length = width - len(string)
    if fill_length <= 0 or padding == '':
        return string

    repeat_count = -(-fill_length // len(padding))
    fill = (padding * repeat_count)[:fill_length]

    return fill + string
