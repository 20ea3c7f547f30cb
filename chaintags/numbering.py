"""
# Chain-Tags: numbering.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Line numbering.
"""

import re
import warnings
from typing import Any, NamedTuple, Optional, Union

from chaintags.bases import ChainableTag
from chaintags.constants import (
    LINE_ART_PAD_WITH,
    LINE_ART_PAD_ZERO_WITH,
    LINE_ART_PREFIX,
    LINE_ART_PREFIX_ZERO,
    LINE_ART_SUFFIX,
    LINE_ART_SUFFIX_ZERO,
    SIGN_FROM_SIGNUM_OFFSET,
)
from chaintags.numerals import NumeralScheme, compute_padding_width, lookup_numbering_scheme
from chaintags.templates import LiteralTemplate, zip_template
from chaintags.utilities import pad_start, split_into_lines


class NumberingOptions(NamedTuple):
    """
    Options for a numbering.

    Unset (`None`) options are resolved when a numbering is rendered, into a new options value;
    a `pad_width` of 0 means the width is computed from the numbers to be rendered.
    `pad_with` may be a string (padding the sign and number together),
    or numeric-like such as `0` (padding the number only, the sign being placed before the padding).
    The `*_zero` options apply to the row numbered exactly zero.
    """
    number_from: int = 0
    prefix: Optional[str] = None
    suffix: Optional[str] = None
    prefix_zero: Optional[str] = None
    suffix_zero: Optional[str] = None
    pad_width: int = 0
    pad_with: Union[str, int, None] = None
    pad_zero_with: Union[str, int, None] = None
    numbering_scheme: str = 'digit'
    sign_all: bool = False

    def with_line_art_defaults(self) -> 'NumberingOptions':
        """
        Resolve unset affixes and padding to box-drawing glyphs.
        """
        return self._replace(
            prefix=LINE_ART_PREFIX if self.prefix is None else self.prefix,
            suffix=LINE_ART_SUFFIX if self.suffix is None else self.suffix,
            prefix_zero=LINE_ART_PREFIX_ZERO if self.prefix_zero is None else self.prefix_zero,
            suffix_zero=LINE_ART_SUFFIX_ZERO if self.suffix_zero is None else self.suffix_zero,
            pad_with=LINE_ART_PAD_WITH if self.pad_with is None else self.pad_with,
            pad_zero_with=LINE_ART_PAD_ZERO_WITH if self.pad_zero_with is None else self.pad_zero_with,
        )

    def with_plain_defaults(self) -> 'NumberingOptions':
        """
        Resolve unset affixes to empty strings, and unset padding to spaces.

        The zero row defaults to the regular affixes and padding.
        """
        prefix = '' if self.prefix is None else self.prefix
        suffix = '' if self.suffix is None else self.suffix
        pad_with = ' ' if self.pad_with is None else self.pad_with

        return self._replace(
            prefix=prefix,
            suffix=suffix,
            prefix_zero=prefix if self.prefix_zero is None else self.prefix_zero,
            suffix_zero=suffix if self.suffix_zero is None else self.suffix_zero,
            pad_with=pad_with,
            pad_zero_with=pad_with if self.pad_zero_with is None else self.pad_zero_with,
        )

    def list_specified_options(self) -> dict[str, Any]:
        return {
            field_name: value
            for field_name, value in self._asdict().items()
            if value != NumberingOptions._field_defaults[field_name]
        }


def is_numeric_like(padding: Union[str, int]) -> bool:
    """
    Whether padding reads as an integer, e.g. `0`, `'0'`, `' 7'`, or `'3rd'`.
    """
    return re.match(pattern=r'\s* [+-]? [0-9]', string=str(padding), flags=re.ASCII | re.VERBOSE) is not None


def compute_signum(n: int) -> int:
    return (n > 0) - (n < 0)


class NumberingCounter:
    """
    A line counter rendering its value with a numeral scheme, padding, sign, and affixes.

    ````
    counter = NumberingCounter(NumberingOptions(number_from=8, pad_width=2, suffix='. '))
    counter.advance().pad  # ' 9. '
    counter.advance().pad  # '10. '
    ````
    """
    value: int
    _options: NumberingOptions
    _stringize: NumeralScheme
    _string_padding: bool

    def __init__(self, options: Optional[NumberingOptions] = None):
        if options is None:
            options = NumberingOptions()

        self._options = options.with_plain_defaults()
        self._stringize = lookup_numbering_scheme(self._options.numbering_scheme)
        self._string_padding = not is_numeric_like(self._options.pad_with)
        self.value = self._options.number_from

    @property
    def options(self) -> NumberingOptions:
        return self._options

    def reset(self) -> 'NumberingCounter':
        self.value = self._options.number_from
        return self

    def advance(self) -> 'NumberingCounter':
        self.value += 1
        return self

    @property
    def raw(self) -> str:
        return self.compute_sign(self.value) + self._stringize(abs(self.value))

    @property
    def pad(self) -> str:
        return self.render(self.value)

    def compute_sign(self, n: int) -> str:
        if self._options.sign_all:
            return SIGN_FROM_SIGNUM_OFFSET[compute_signum(n) + 1]

        if n < 0:
            return '-'

        return ''

    def render(self, n: int) -> str:
        options = self._options

        if n == 0:
            prefix = options.prefix_zero
            suffix = options.suffix_zero
            padding = str(options.pad_zero_with)
        else:
            prefix = options.prefix
            suffix = options.suffix
            padding = str(options.pad_with)

        sign = self.compute_sign(n)
        magnitude = self._stringize(abs(n))

        if self._string_padding:
            number = pad_start(sign + magnitude, options.pad_width, padding)
        else:
            number = sign + pad_start(magnitude, options.pad_width - len(sign), padding)

        return f'{prefix}{number}{suffix}'


class NumberingTag(ChainableTag):
    """
    A tag that prefixes each line with its number.

    Unset options default to line art, e.g. `│ 9│`, `│10│`, and `┼─0┼` for the zero row.
    The options are never mutated, so the same tag may be reused on texts of differing lengths.
    """
    _options: NumberingOptions

    def __init__(self, options: NumberingOptions, name: str, verbose_mode_enabled: bool = False):
        super().__init__(name, verbose_mode_enabled)
        lookup_numbering_scheme(options.numbering_scheme)
        self._options = options

    @property
    def options(self) -> NumberingOptions:
        return self._options

    def _apply(self, template: LiteralTemplate) -> str:
        lines = split_into_lines(zip_template(template))

        options = self._options.with_line_art_defaults()
        required_width = compute_padding_width(
            options.number_from,
            len(lines),
            options.numbering_scheme,
            options.sign_all,
        )
        if options.pad_width <= 0:
            options = options._replace(pad_width=required_width)
        elif options.pad_width < required_width:
            warnings.warn(
                f'warning: `pad_width={options.pad_width}` is narrower than the {required_width} characters '
                f'needed by `{self._name}`; numbers will not be aligned'
            )

        counter = NumberingCounter(options)

        return '\n'.join(f'{counter.advance().pad}{line}' for line in lines)


def numbering(options: Optional[NumberingOptions] = None, verbose_mode_enabled: bool = False,
              **keyword_options: Any) -> NumberingTag:
    """
    Build a numbering tag, from a `NumberingOptions` value and/or keyword options.

    ````
    numbering(number_from=-29, numbering_scheme='roman')
    ````
    """
    if options is None:
        options = NumberingOptions(**keyword_options)
    else:
        options = NumberingOptions(**{**options._asdict(), **keyword_options})

    specified_options = options.list_specified_options()
    if len(specified_options) == 0:
        name = 'number_lines'
    else:
        option_specifications = ', '.join(f'{key}={value!r}' for key, value in specified_options.items())
        name = f'numbering({option_specifications})'

    return NumberingTag(options, name, verbose_mode_enabled)


number_lines = numbering()
