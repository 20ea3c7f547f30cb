"""
# Chain-Tags: numerals.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Numeral schemes for line numbering, and the padding widths they require.
"""

from typing import Callable, Optional

from chaintags.constants import (
    FULL_WIDTH_DIGIT_FROM_DIGIT,
    ROMAN_LENGTH_BREAKPOINTS,
    ROMAN_LITERALS,
    SUBSCRIPT_DIGIT_FROM_DIGIT,
)
from chaintags.exceptions import UnrecognisedSchemeException

NumeralScheme = Callable[[int], str]


def alphabetize(uppercase: bool = False) -> NumeralScheme:
    """
    Build a bijective base-26 numeral scheme: 1 is `a`, 26 is `z`, 27 is `aa`, and 0 is empty.
    """
    alpha_base = ord('A' if uppercase else 'a')

    def alpha(n: int) -> str:
        letters: list[str] = []
        while n >= 1:
            n, remainder = divmod(n - 1, 26)
            letters.append(chr(alpha_base + remainder))

        return ''.join(reversed(letters))

    return alpha


def romanize(uppercase: bool = True) -> NumeralScheme:
    """
    Build a Roman numeral scheme, using the greedy subtractive notation; 0 is empty.

    Latin letters are used rather than the Unicode Roman numeral code points,
    as recommended by Unicode.
    """
    literals = [
        (roman_literal if uppercase else roman_literal.lower(), arabic_value)
        for roman_literal, arabic_value in ROMAN_LITERALS
    ]

    def roman(n: int) -> str:
        if n < 0:
            return '-' + roman(-n)

        numeral = ''
        for roman_literal, arabic_value in literals:
            count, n = divmod(n, arabic_value)
            numeral += roman_literal * count

        return numeral

    return roman


def arabize(digit_from_digit: Optional[dict[str, str]] = None) -> NumeralScheme:
    """
    Build a decimal numeral scheme, optionally mapping each ASCII digit to another glyph.
    """
    def digit(n: int) -> str:
        if digit_from_digit is None:
            return str(n)

        return ''.join(digit_from_digit.get(character, character) for character in str(n))

    return digit


NUMBERING_SCHEMES: dict[str, NumeralScheme] = {
    'alpha': alphabetize(uppercase=False),
    'Alpha': alphabetize(uppercase=True),
    'roman': romanize(uppercase=False),
    'Roman': romanize(uppercase=True),
    'digit': arabize(),
    'Digit': arabize(FULL_WIDTH_DIGIT_FROM_DIGIT),
    'subscript': arabize(SUBSCRIPT_DIGIT_FROM_DIGIT),
}


def lookup_numbering_scheme(scheme_name: str) -> NumeralScheme:
    try:
        return NUMBERING_SCHEMES[scheme_name]
    except KeyError:
        raise UnrecognisedSchemeException(scheme_name)


def compute_roman_width(value: int) -> int:
    """
    Compute the length of the longest Roman numeral for numbers from 0 to `value`.
    """
    for index, breakpoint in enumerate(ROMAN_LENGTH_BREAKPOINTS):
        if breakpoint > value:
            return index

    # past MMMDCCCLXXXVIII, each further thousand adds an M
    return len(ROMAN_LENGTH_BREAKPOINTS) + (value - ROMAN_LENGTH_BREAKPOINTS[-1]) // 1000


def compute_padding_width(number_from: int, line_count: int, numbering_scheme: str = 'digit',
                          signed: bool = False) -> int:
    """
    Compute the width needed to render every number of a numbering, sign included.

    Numbering counters are advanced before rendering,
    so the numbers run from `number_from + 1` to `number_from + line_count`.
    One character is reserved for the sign if `signed` is set, or if any of the numbers is negative.
    """
    scheme = lookup_numbering_scheme(numbering_scheme)

    last_value = number_from + line_count
    if line_count > 0:
        first_value = number_from + 1
    else:
        first_value = last_value

    max_magnitude = max(abs(first_value), abs(last_value))

    if signed or min(first_value, last_value) < 0:
        sign_width = 1
    else:
        sign_width = 0

    if numbering_scheme.lower() == 'roman':
        magnitude_width = compute_roman_width(max_magnitude)
    else:
        magnitude_width = len(scheme(max_magnitude))

    return sign_width + magnitude_width
