"""
# Chain-Tags: bases.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Base classes for tags, and the chaining combinator.
"""

import abc
from typing import Any, Callable, Optional, Union

from chaintags.constants import ANONYMOUS_TAG_NAME, VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from chaintags.exceptions import TerminalEncodingException
from chaintags.templates import (
    ArgumentShape,
    LiteralTemplate,
    classify_argument,
    to_literal_template,
    zip_template,
)

TagFunction = Callable[[LiteralTemplate], str]


class Tag(abc.ABC):
    """
    Base class for a tag.

    A tag turns a literal template into a string, and carries a display name used for diagnostics only.
    A plain tag may only be called on templates:
    ````
    tag(LiteralTemplate(['Hello ', '!'], ['world']))
    tag(['Hello ', '!'], 'world')
    tag(t'Hello {name}!')
    ````
    """
    _name: str
    _verbose_mode_enabled: bool

    def __init__(self, name: str, verbose_mode_enabled: bool = False):
        self._name = name
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def name(self) -> str:
        return self._name

    @property
    def verbose_mode_enabled(self) -> bool:
        return self._verbose_mode_enabled

    def __repr__(self) -> str:
        return f'<{type(self).__name__} {self._name}>'

    def __call__(self, argument: Any, *values: Any) -> Union[str, 'ChainableTag']:
        if classify_argument(argument) is not ArgumentShape.TEMPLATE:
            raise TypeError(f'error: tag `{self._name}` can only be called on a template')

        return self.apply(to_literal_template(argument, values))

    def apply(self, template: LiteralTemplate) -> str:
        string_after = self._apply(template)

        if self._verbose_mode_enabled:
            string_before = zip_template(template)
            if string_before == string_after:
                no_change_indicator = ' (no change)'
            else:
                no_change_indicator = ''

            try:
                print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE {self._name}')
                print(string_before)
                print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator)
                print(string_after)
                print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER {self._name}')
                print('\n\n\n\n')
            except UnicodeEncodeError as unicode_encode_error:
                # caused by line-art numbering glyphs on a narrow terminal encoding
                error_message = (
                    'bad print due to non-Unicode terminal encoding, likely `cp1252` on Git BASH for Windows. '
                    'Try setting the `PYTHONIOENCODING` environment variable to `utf-8`.'
                )
                raise TerminalEncodingException(error_message) from unicode_encode_error

        return string_after

    @abc.abstractmethod
    def _apply(self, template: LiteralTemplate) -> str:
        """
        Apply the tag to a literal template.
        """
        raise NotImplementedError


class ChainableTag(Tag, abc.ABC):
    """
    Base class for a tag that can also be chained with other tags, or called on plain strings.

    ````
    paragraph(['Some ', ' text'], value)    # template, returns a string
    indent(4)(paragraph)                    # tag, returns a chainable tag
    indent(4)(paragraph)('Some string')     # string, returns a string
    ````
    When chaining, the inner (deepest) tag is applied first,
    so `indent(4)(paragraph)` paragraphs the text and then indents it.
    """
    def __call__(self, argument: Any, *values: Any) -> Union[str, 'ChainableTag']:
        argument_shape = classify_argument(argument)

        if argument_shape is ArgumentShape.TEMPLATE:
            return self.apply(to_literal_template(argument, values))

        if len(values) > 0:
            raise TypeError(f'error: tag `{self._name}` takes values only alongside template segments')

        if argument_shape is ArgumentShape.TAG:
            return self.chain(argument)

        return self.apply(LiteralTemplate.from_string(argument))

    def chain(self, inner: Union[Tag, TagFunction]) -> 'ComposedTag':
        """
        Compose with an inner tag, which is to be applied first.
        """
        if not isinstance(inner, Tag):
            inner = make_chainable(inner)

        return ComposedTag(self, inner, self._verbose_mode_enabled)


class ComposedTag(ChainableTag):
    """
    A chainable tag applying an inner tag, then an outer tag to the result.

    The display name is `«outer_name»(«inner_name»)`.
    """
    _outer: ChainableTag
    _inner: Tag

    def __init__(self, outer: ChainableTag, inner: Tag, verbose_mode_enabled: bool = False):
        super().__init__(f'{outer.name}({inner.name})', verbose_mode_enabled)
        self._outer = outer
        self._inner = inner

    @property
    def outer(self) -> ChainableTag:
        return self._outer

    @property
    def inner(self) -> Tag:
        return self._inner

    def _apply(self, template: LiteralTemplate) -> str:
        inner_string = self._inner.apply(template)
        return self._outer.apply(LiteralTemplate.from_string(inner_string))


class FunctionTag(ChainableTag):
    """
    A chainable tag delegating to a plain `(LiteralTemplate) -> str` function.
    """
    _function: TagFunction

    def __init__(self, function: TagFunction, name: str, verbose_mode_enabled: bool = False):
        super().__init__(name, verbose_mode_enabled)
        self._function = function

    def _apply(self, template: LiteralTemplate) -> str:
        return self._function(template)


def compute_default_tag_name(function: Any) -> str:
    if isinstance(function, Tag):
        return function.name

    name = getattr(function, '__name__', None)
    if not name or name == '<lambda>':
        return ANONYMOUS_TAG_NAME

    return name


def make_chainable(function: Union[Tag, TagFunction], name: Optional[str] = None,
                   verbose_mode_enabled: bool = False) -> ChainableTag:
    """
    Turn a `(LiteralTemplate) -> str` function into a chainable tag.

    The name defaults to the function's `__name__` (or `anonymous_tag` for lambdas).
    Can be used as a decorator:
    ````
    @make_chainable
    def shout(template: LiteralTemplate) -> str:
        return zip_template(template).upper()
    ````
    """
    if name is None:
        name = compute_default_tag_name(function)

    if isinstance(function, Tag):
        return FunctionTag(function.apply, name, verbose_mode_enabled)

    return FunctionTag(function, name, verbose_mode_enabled)
