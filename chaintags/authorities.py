"""
# Chain-Tags: authorities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The higher power that turns tag expressions into tags.
"""

import re
from typing import Any, Callable, NamedTuple, Optional

from chaintags.bases import ChainableTag
from chaintags.exceptions import (
    InvalidParameterException,
    TagExpressionSyntaxException,
    UnlegislatedExecuteException,
    UnrecognisedTagException,
)
from chaintags.numbering import NumberingOptions, numbering
from chaintags.numerals import NUMBERING_SCHEMES
from chaintags.tags import FlushTag, FoldTag, IdentityTag, IndentTag, OutdentTag, ParagraphTag, WrapTag

CONSTANT_TAG_NAMES = ('identity', 'paragraph', 'fold', 'flush', 'outdent', 'number_lines')
PARAMETERISED_TAG_SIGNATURES = ('indent(«integer»)', 'wrap(«integer»)', 'numbering(«name»=«value», [...])')
INTEGER_PARAMETER_NAMES = ('number_from', 'pad_width')
BOOLEAN_PARAMETER_NAMES = ('sign_all',)


class Token(NamedTuple):
    kind: str
    text: str
    position: int


class TokenStream:
    """
    Cursor over the tokens of a tag expression.
    """
    _tokens: list['Token']
    _index: int
    _expression_length: int

    def __init__(self, tokens: list['Token'], expression_length: int):
        self._tokens = tokens
        self._index = 0
        self._expression_length = expression_length

    @property
    def is_exhausted(self) -> bool:
        return self._index >= len(self._tokens)

    def peek(self) -> Optional['Token']:
        if self.is_exhausted:
            return None

        return self._tokens[self._index]

    def peek_is(self, text: str) -> bool:
        token = self.peek()
        return token is not None and token.kind == 'punctuation' and token.text == text

    def advance(self) -> 'Token':
        token = self._tokens[self._index]
        self._index += 1
        return token

    def expect(self, kind: str, description: str) -> 'Token':
        token = self.peek()
        if token is None:
            raise TagExpressionSyntaxException(
                f'expected {description} but reached end of expression',
                self._expression_length,
            )

        if token.kind != kind:
            raise TagExpressionSyntaxException(
                f'expected {description} but got `{token.text}`',
                token.position,
            )

        return self.advance()

    def expect_punctuation(self, text: str) -> 'Token':
        token = self.expect('punctuation', f'`{text}`')
        if token.text != text:
            raise TagExpressionSyntaxException(f'expected `{text}` but got `{token.text}`', token.position)

        return token


class TagAuthority:
    """
    Object governing the parsing of tag expressions and the application of the resulting tag.

    ## `legislate`

    Parses a tag expression, see the constant `TAG_EXPRESSION_SYNTAX_HELP` in `constants.py`.
    Chains are nested calls, the innermost tag being applied first:
    ````
    indent(-2)(paragraph(outdent))
    wrap(40)(numbering(number_from=-29, numbering_scheme=roman))
    ````

    ## `execute`

    Applies the legislated tag to a string.
    """
    _tag: Optional['ChainableTag']
    _verbose_mode_enabled: bool

    def __init__(self, verbose_mode_enabled: bool = False):
        self._tag = None
        self._verbose_mode_enabled = verbose_mode_enabled

    @property
    def tag(self) -> Optional['ChainableTag']:
        return self._tag

    @staticmethod
    def tokenise(expression: str) -> list['Token']:
        tokens: list['Token'] = []

        for token_match in re.finditer(
            pattern=r'''
                [\s]*
                (?:
                    (?P<name> [A-Za-z_] [A-Za-z0-9_]* )
                        |
                    (?P<integer> [+-]? [0-9]+ )
                        |
                    (?P<string> " [^"]* " | ' [^']* ' )
                        |
                    (?P<punctuation> [(),=] )
                        |
                    (?P<invalid> [\S] )
                )
            ''',
            string=expression,
            flags=re.ASCII | re.VERBOSE,
        ):
            kind = token_match.lastgroup
            text = token_match.group(kind)
            position = token_match.start(kind)

            if kind == 'invalid':
                raise TagExpressionSyntaxException(f'invalid character `{text}`', position)

            tokens.append(Token(kind, text, position))

        return tokens

    @staticmethod
    def describe_tags() -> list[str]:
        return [
            *CONSTANT_TAG_NAMES,
            *PARAMETERISED_TAG_SIGNATURES,
        ]

    @staticmethod
    def describe_numbering_schemes() -> list[str]:
        return list(NUMBERING_SCHEMES)

    def legislate(self, expression: str) -> 'ChainableTag':
        tokens = TagAuthority.tokenise(expression)
        token_stream = TokenStream(tokens, len(expression))

        tag = self.parse_expression(token_stream)

        if not token_stream.is_exhausted:
            unexpected_token = token_stream.peek()
            raise TagExpressionSyntaxException(
                f'unexpected `{unexpected_token.text}` after complete expression',
                unexpected_token.position,
            )

        self._tag = tag

        return tag

    def parse_expression(self, token_stream: 'TokenStream') -> 'ChainableTag':
        name_token = token_stream.expect('name', 'tag name')
        tag = self.build_tag(name_token, token_stream)

        while token_stream.peek_is('('):
            token_stream.advance()
            inner_tag = self.parse_expression(token_stream)
            token_stream.expect_punctuation(')')
            tag = tag.chain(inner_tag)

        return tag

    def build_tag(self, name_token: 'Token', token_stream: 'TokenStream') -> 'ChainableTag':
        tag_name = name_token.text
        verbose_mode_enabled = self._verbose_mode_enabled

        constant_tag_builder = self.compute_constant_tag_builder(tag_name)
        if constant_tag_builder is not None:
            return constant_tag_builder(verbose_mode_enabled)

        if tag_name == 'indent':
            return IndentTag(TagAuthority.parse_integer_parameter(token_stream), verbose_mode_enabled)

        if tag_name == 'wrap':
            return WrapTag(TagAuthority.parse_integer_parameter(token_stream), verbose_mode_enabled)

        if tag_name == 'numbering':
            keyword_options = TagAuthority.parse_keyword_parameters(token_stream)
            return numbering(verbose_mode_enabled=verbose_mode_enabled, **keyword_options)

        raise UnrecognisedTagException(tag_name)

    @staticmethod
    def compute_constant_tag_builder(tag_name: str) -> Optional[Callable[[bool], 'ChainableTag']]:
        if tag_name == 'identity':
            return IdentityTag
        elif tag_name == 'paragraph':
            return ParagraphTag
        elif tag_name == 'fold':
            return FoldTag
        elif tag_name == 'flush':
            return FlushTag
        elif tag_name == 'outdent':
            return OutdentTag
        elif tag_name == 'number_lines':
            return lambda verbose_mode_enabled: numbering(verbose_mode_enabled=verbose_mode_enabled)

        return None

    @staticmethod
    def parse_integer_parameter(token_stream: 'TokenStream') -> int:
        token_stream.expect_punctuation('(')
        integer_token = token_stream.expect('integer', 'integer parameter')
        token_stream.expect_punctuation(')')

        return int(integer_token.text)

    @staticmethod
    def parse_keyword_parameters(token_stream: 'TokenStream') -> dict[str, Any]:
        keyword_parameters: dict[str, Any] = {}

        token_stream.expect_punctuation('(')
        if token_stream.peek_is(')'):
            token_stream.advance()
            return keyword_parameters

        while True:
            parameter_name_token = token_stream.expect('name', 'parameter name')
            parameter_name = parameter_name_token.text
            if parameter_name not in NumberingOptions._fields:
                raise InvalidParameterException(f'unrecognised parameter `{parameter_name}` for `numbering`')
            if parameter_name in keyword_parameters:
                raise InvalidParameterException(f'parameter `{parameter_name}` specified more than once')

            token_stream.expect_punctuation('=')
            parameter_value = TagAuthority.parse_parameter_value(token_stream)
            TagAuthority.validate_parameter_value(parameter_name, parameter_value)
            keyword_parameters[parameter_name] = parameter_value

            if token_stream.peek_is(','):
                token_stream.advance()
                continue

            token_stream.expect_punctuation(')')
            return keyword_parameters

    @staticmethod
    def parse_parameter_value(token_stream: 'TokenStream') -> Any:
        token = token_stream.peek()
        if token is None or token.kind == 'punctuation':
            return token_stream.expect('name', 'parameter value')

        token_stream.advance()

        if token.kind == 'integer':
            return int(token.text)

        if token.kind == 'string':
            return token.text[1:-1]

        if token.text.lower() == 'true':
            return True

        if token.text.lower() == 'false':
            return False

        return token.text

    @staticmethod
    def validate_parameter_value(parameter_name: str, parameter_value: Any):
        if parameter_name in INTEGER_PARAMETER_NAMES:
            is_valid = isinstance(parameter_value, int) and not isinstance(parameter_value, bool)
            expected_type = 'an integer'
        elif parameter_name in BOOLEAN_PARAMETER_NAMES:
            is_valid = isinstance(parameter_value, bool)
            expected_type = '`true` or `false`'
        else:
            is_valid = not isinstance(parameter_value, bool)
            expected_type = 'a string or an integer'

        if not is_valid:
            raise InvalidParameterException(
                f'invalid value `{parameter_value}` for parameter `{parameter_name}` (expected {expected_type})'
            )

    def execute(self, string: str) -> str:
        if self._tag is None:
            raise UnlegislatedExecuteException('error: cannot call `execute(string)` before `legislate(expression)`')

        if self._verbose_mode_enabled:
            print(f'Tag chain: {self._tag.name}\n\n\n\n')

        return self._tag(string)
