"""
# Chain-Tags

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Chainable tags for literal templates and plain strings.
"""

from chaintags._version import __version__
from chaintags.bases import ChainableTag, ComposedTag, FunctionTag, Tag, make_chainable
from chaintags.numbering import NumberingCounter, NumberingOptions, number_lines, numbering
from chaintags.numerals import NUMBERING_SCHEMES, compute_padding_width
from chaintags.tags import flush, fold, identity, indent, outdent, paragraph, raw, wrap
from chaintags.templates import LiteralTemplate, zip_template

__all__ = [
    '__version__',
    'ChainableTag',
    'ComposedTag',
    'FunctionTag',
    'LiteralTemplate',
    'NUMBERING_SCHEMES',
    'NumberingCounter',
    'NumberingOptions',
    'Tag',
    'compute_padding_width',
    'flush',
    'fold',
    'identity',
    'indent',
    'make_chainable',
    'number_lines',
    'numbering',
    'outdent',
    'paragraph',
    'raw',
    'wrap',
    'zip_template',
]
