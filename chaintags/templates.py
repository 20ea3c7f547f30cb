"""
# Chain-Tags: templates.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Literal templates, and the interpolation engine that zips their segments and values together.
"""

import enum
from collections.abc import Sequence
from typing import Any, Optional


class LiteralTemplate:
    """
    A literal template: string segments interleaved with interpolated values.

    A template with segments `s0, s1, s2` and values `v0, v1` represents `s0 v0 s1 v1 s2`,
    so there should be exactly one more segment than there are values.
    Missing values render as the empty string and surplus values are ignored.

    `raw` holds the same segments with escape sequences unprocessed;
    it defaults to `segments` and is only consulted by the `raw` tag.
    """
    _segments: tuple[str, ...]
    _values: tuple[Any, ...]
    _raw: tuple[str, ...]

    def __init__(self, segments: Sequence[str], values: Sequence[Any] = (), raw: Optional[Sequence[str]] = None):
        self._segments = tuple(segments)
        self._values = tuple(values)
        if raw is None:
            self._raw = self._segments
        else:
            self._raw = tuple(raw)

    @property
    def segments(self) -> tuple[str, ...]:
        return self._segments

    @property
    def values(self) -> tuple[Any, ...]:
        return self._values

    @property
    def raw(self) -> tuple[str, ...]:
        return self._raw

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LiteralTemplate):
            return NotImplemented

        return (self._segments, self._values, self._raw) == (other.segments, other.values, other.raw)

    def __repr__(self) -> str:
        return f'LiteralTemplate(segments={self._segments!r}, values={self._values!r}, raw={self._raw!r})'

    @staticmethod
    def from_string(string: str) -> 'LiteralTemplate':
        """
        Build the single-segment, zero-value template for a plain string.
        """
        return LiteralTemplate((string,))

    @staticmethod
    def from_template_string(template: Any) -> 'LiteralTemplate':
        """
        Build a literal template from a template string object (`t'...'`, Python 3.14 onwards).

        Conversions and format specifications are applied eagerly,
        so `t'{x!r:>6}'` interpolates `format(repr(x), '>6')`.
        """
        values = tuple(
            format_interpolation(interpolation)
            for interpolation in template.interpolations
        )

        return LiteralTemplate(template.strings, values)


def is_template_string(argument: Any) -> bool:
    return (
        not isinstance(argument, (str, LiteralTemplate))
        and hasattr(argument, 'strings')
        and hasattr(argument, 'interpolations')
    )


def format_interpolation(interpolation: Any) -> str:
    value = interpolation.value
    conversion = getattr(interpolation, 'conversion', None)
    format_spec = getattr(interpolation, 'format_spec', '') or ''

    if conversion == 'r':
        value = repr(value)
    elif conversion == 's':
        value = str(value)
    elif conversion == 'a':
        value = ascii(value)

    return format(value, format_spec)


def stringify_value(value: Any) -> str:
    if value is None:
        return ''

    return str(value)


def zip_segments(segments: tuple[str, ...], values: tuple[Any, ...]) -> str:
    pieces: list[str] = []
    last_index = len(segments) - 1

    for index, segment in enumerate(segments):
        pieces.append(segment)
        if index < last_index and index < len(values):
            pieces.append(stringify_value(values[index]))

    return ''.join(pieces)


def zip_template(template: LiteralTemplate) -> str:
    """
    Interleave the values of a template between its segments.
    """
    return zip_segments(template.segments, template.values)


def zip_raw_template(template: LiteralTemplate) -> str:
    """
    Interleave the values of a template between its raw segments.
    """
    return zip_segments(template.raw, template.values)


class ArgumentShape(enum.Enum):
    TEMPLATE = 'template'
    TAG = 'tag'
    STRING = 'string'


def classify_argument(argument: Any) -> ArgumentShape:
    """
    Classify the first argument of a tag call.

    - A plain string is a STRING (checked first, since strings are sequences).
    - A literal template, a template string object,
      or any other sequence of strings (the segments, with values passed separately) is a TEMPLATE.
    - Any other callable is a TAG.
    """
    if isinstance(argument, str):
        return ArgumentShape.STRING

    if isinstance(argument, LiteralTemplate) or is_template_string(argument):
        return ArgumentShape.TEMPLATE

    if callable(argument):
        return ArgumentShape.TAG

    if isinstance(argument, Sequence) and all(isinstance(segment, str) for segment in argument):
        return ArgumentShape.TEMPLATE

    raise TypeError(f'error: cannot call a tag on `{type(argument).__name__}`')


def to_literal_template(argument: Any, values: tuple[Any, ...]) -> LiteralTemplate:
    """
    Convert a TEMPLATE-shaped argument (and any separately passed values) to a literal template.
    """
    if isinstance(argument, LiteralTemplate) or is_template_string(argument):
        if len(values) > 0:
            raise TypeError('error: values cannot be passed alongside a template that already carries them')

        if isinstance(argument, LiteralTemplate):
            return argument

        return LiteralTemplate.from_template_string(argument)

    return LiteralTemplate(argument, values)
