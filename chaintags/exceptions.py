"""
# Chain-Tags: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class InvalidParameterException(Exception):
    pass


class TagExpressionSyntaxException(Exception):
    _position: int

    def __init__(self, message: str, position: int):
        super().__init__(message)
        self._position = position

    @property
    def position(self) -> int:
        return self._position


class TerminalEncodingException(Exception):
    pass


class UnlegislatedExecuteException(Exception):
    pass


class UnrecognisedSchemeException(Exception):
    _scheme_name: str

    def __init__(self, scheme_name: str):
        super().__init__(f'unrecognised numbering scheme `{scheme_name}`')
        self._scheme_name = scheme_name

    @property
    def scheme_name(self) -> str:
        return self._scheme_name


class UnrecognisedTagException(Exception):
    _tag_name: str

    def __init__(self, tag_name: str):
        super().__init__(f'unrecognised tag `{tag_name}`')
        self._tag_name = tag_name

    @property
    def tag_name(self) -> str:
        return self._tag_name
