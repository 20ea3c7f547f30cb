"""
# Chain-Tags: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

ANONYMOUS_TAG_NAME = 'anonymous_tag'

LINE_ART_PREFIX = '│'
LINE_ART_SUFFIX = '│'
LINE_ART_PREFIX_ZERO = '┼'
LINE_ART_SUFFIX_ZERO = '┼'
LINE_ART_PAD_WITH = ' '
LINE_ART_PAD_ZERO_WITH = '─'

SIGN_FROM_SIGNUM_OFFSET = ('-', '±', '+')

ROMAN_LITERALS = (
    ('M', 1000),
    ('CM', 900),
    ('D', 500),
    ('CD', 400),
    ('C', 100),
    ('XC', 90),
    ('L', 50),
    ('XL', 40),
    ('X', 10),
    ('IX', 9),
    ('V', 5),
    ('IV', 4),
    ('I', 1),
)

# The k-th entry is the smallest value whose Roman numeral has k + 1 letters.
ROMAN_LENGTH_BREAKPOINTS = (1, 2, 3, 8, 18, 28, 38, 88, 188, 288, 388, 888, 1888, 2888, 3888)

FULL_WIDTH_DIGIT_FROM_DIGIT = {
    '0': '０',
    '1': '１',
    '2': '２',
    '3': '３',
    '4': '４',
    '5': '５',
    '6': '６',
    '7': '７',
    '8': '８',
    '9': '９',
}
SUBSCRIPT_DIGIT_FROM_DIGIT = {
    '0': '₀',
    '1': '₁',
    '2': '₂',
    '3': '₃',
    '4': '₄',
    '5': '₅',
    '6': '₆',
    '7': '₇',
    '8': '₈',
    '9': '₉',
}

TAG_EXPRESSION_SYNTAX_HELP = '''\
A tag expression is a tag name, optionally followed by parameters,
and then by any number of parenthesised tag expressions to chain:
(1) a constant tag (`identity`, `paragraph`, `fold`, `flush`, `outdent`, `number_lines`);
(2) a parameterised tag (`indent(«integer»)`, `wrap(«integer»)`, `numbering(«name»=«value», [...])`);
(3) a chain (`«expression»(«expression»)`), where the inner expression is applied first.
- Note for (2): numbering values may be integers, quoted strings, `true`, `false`, or bare words,
  e.g. `numbering(number_from=-29, numbering_scheme=roman)`.
- Note for (3): `indent(-2)(paragraph(outdent))` applies `outdent`, then `paragraph`, then `indent(-2)`.
'''
