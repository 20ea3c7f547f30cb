"""
# Chain-Tags: tags.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The tag library.

Every line-oriented tag first zips its template into a string (see `identity`),
then splits it into normalised lines (see `utilities.split_into_lines`) before transforming it.
"""

import math
from typing import NamedTuple

from chaintags.bases import ChainableTag, Tag
from chaintags.templates import LiteralTemplate, zip_raw_template, zip_template
from chaintags.utilities import compute_indentation, compute_minimum_indentation, is_blank, split_into_lines


class IdentityTag(ChainableTag):
    """
    A tag that zips the segments and values of a template together, and nothing else.
    """
    def __init__(self, verbose_mode_enabled: bool = False):
        super().__init__('identity', verbose_mode_enabled)

    def _apply(self, template: LiteralTemplate) -> str:
        return zip_template(template)


class RawTag(Tag):
    """
    A tag that zips the raw segments (escape sequences unprocessed) and values of a template together.

    Not chainable, since other tags operate on processed text;
    it may however be the innermost tag of a chain, as in `identity(raw)`.
    """
    def __init__(self, verbose_mode_enabled: bool = False):
        super().__init__('raw', verbose_mode_enabled)

    def _apply(self, template: LiteralTemplate) -> str:
        return zip_raw_template(template)


class ParagraphTag(ChainableTag):
    """
    A tag that removes blank lines and separates the remaining lines by single blank lines.
    """
    def __init__(self, verbose_mode_enabled: bool = False):
        super().__init__('paragraph', verbose_mode_enabled)

    def _apply(self, template: LiteralTemplate) -> str:
        lines = split_into_lines(zip_template(template))
        return '\n\n'.join(line for line in lines if not is_blank(line))


class FoldTag(ChainableTag):
    """
    A tag that removes line breaks.

    Use `fold(outdent)` to remove the first level of indentation too, or `fold(flush)` to remove all of it.
    """
    def __init__(self, verbose_mode_enabled: bool = False):
        super().__init__('fold', verbose_mode_enabled)

    def _apply(self, template: LiteralTemplate) -> str:
        return ''.join(split_into_lines(zip_template(template)))


class FlushTag(ChainableTag):
    """
    A tag that removes all leading whitespace (flushes text left).
    """
    def __init__(self, verbose_mode_enabled: bool = False):
        super().__init__('flush', verbose_mode_enabled)

    def _apply(self, template: LiteralTemplate) -> str:
        lines = split_into_lines(zip_template(template))
        return '\n'.join(line.strip() for line in lines)


class OutdentTag(ChainableTag):
    """
    A tag that removes the first level of indentation, i.e. the indentation common to all non-blank lines.
    """
    def __init__(self, verbose_mode_enabled: bool = False):
        super().__init__('outdent', verbose_mode_enabled)

    def _apply(self, template: LiteralTemplate) -> str:
        lines = split_into_lines(zip_template(template))

        indentation = compute_minimum_indentation(lines)
        if indentation == math.inf:
            indentation = 0

        return '\n'.join(line[indentation:] for line in lines)


class IndentTag(ChainableTag):
    """
    A tag that adds `amount` spaces of indentation to each line.

    A negative amount removes indentation instead,
    capped by the indentation common to all non-blank lines.
    """
    _amount: int

    def __init__(self, amount: int, verbose_mode_enabled: bool = False):
        super().__init__(f'indent({amount})', verbose_mode_enabled)
        self._amount = amount

    @property
    def amount(self) -> int:
        return self._amount

    def _apply(self, template: LiteralTemplate) -> str:
        lines = split_into_lines(zip_template(template))

        if self._amount >= 0:
            spaces = ' ' * self._amount
            return '\n'.join(spaces + line for line in lines)

        indentation = min(-self._amount, compute_minimum_indentation(lines))
        return '\n'.join(line[indentation:] for line in lines)


class LineWithIndent(NamedTuple):
    indentation: int
    line: str


class WrapTag(ChainableTag):
    """
    A tag that re-flows text to lines of at most `width` characters.

    Consecutive lines with identical indentation are first joined into one logical line,
    blank lines being preserved as paragraph breaks.
    Logical lines are then split at spaces, continuations keeping the indentation of their logical line.
    A line without a suitable space is left long (there is no hyphenation).
    """
    _width: int

    def __init__(self, width: int, verbose_mode_enabled: bool = False):
        super().__init__(f'wrap({width})', verbose_mode_enabled)
        self._width = width

    @property
    def width(self) -> int:
        return self._width

    def _apply(self, template: LiteralTemplate) -> str:
        lines = split_into_lines(zip_template(template))
        logical_lines = WrapTag.merge_lines_by_indentation(lines)

        return '\n'.join(
            physical_line
            for logical_line in logical_lines
            for physical_line in WrapTag.split_logical_line(logical_line, self._width)
        )

    @staticmethod
    def merge_lines_by_indentation(lines: list[str]) -> list[LineWithIndent]:
        """
        Join consecutive lines having identical indentation.

        A blank line becomes an empty logical line of zero indentation,
        and the line following it always starts a new logical line.
        """
        logical_lines: list[LineWithIndent] = []
        current_indentation = -1

        for line in lines:
            previous_indentation = current_indentation
            current_indentation = compute_indentation(line)

            if is_blank(line):
                current_indentation = -1
                logical_lines.append(LineWithIndent(0, ''))
            elif current_indentation != previous_indentation or len(logical_lines) == 0:
                logical_lines.append(LineWithIndent(current_indentation, line))
            else:
                indentation, joined_line = logical_lines[-1]
                logical_lines[-1] = LineWithIndent(indentation, f'{joined_line} {line.lstrip()}')

        return logical_lines

    @staticmethod
    def split_logical_line(logical_line: LineWithIndent, width: int) -> list[str]:
        """
        Split a logical line into physical lines of at most `width` characters where possible.

        Breaks at the last space at-or-before column `width` lying past the indentation,
        failing which at the first space at-or-after column `width` lying past the indentation.
        """
        indentation, line = logical_line
        physical_lines: list[str] = []

        while len(line) > width:
            break_index = line.rfind(' ', indentation, max(width, 0) + 1)
            if break_index < 0:
                break_index = line.find(' ', max(width, indentation))
            if break_index < 0:
                break

            physical_lines.append(line[:break_index])
            line = ' ' * indentation + line[break_index + 1:]

        physical_lines.append(line)

        return physical_lines


identity = IdentityTag()
raw = RawTag()
paragraph = ParagraphTag()
fold = FoldTag()
flush = FlushTag()
outdent = OutdentTag()


def indent(amount: int, verbose_mode_enabled: bool = False) -> IndentTag:
    return IndentTag(amount, verbose_mode_enabled)


def wrap(width: int, verbose_mode_enabled: bool = False) -> WrapTag:
    return WrapTag(width, verbose_mode_enabled)
