"""Token types produced by the Mython lexer.

Every token is an instance of one of the classes below. Four of them carry
a value (`Number`, `Id`, `Char`, `String`), the rest are plain markers.
Marker names that collide with Python keywords get a trailing underscore.

Tokens compare equal when they are the same class with the same value.
"""

__all__ = [
    "Token",
    "Number",
    "Id",
    "Char",
    "String",
    "Class",
    "Return",
    "If",
    "Else",
    "Def",
    "Newline",
    "Print",
    "Indent",
    "Dedent",
    "Eof",
    "And",
    "Or",
    "Not",
    "Eq",
    "NotEq",
    "LessOrEq",
    "GreaterOrEq",
    "None_",
    "True_",
    "False_",
]


class Token:
    """Base class for all tokens.

    Args:
        value: Payload for value-bearing tokens, None for markers

    Attributes:
        value: (int | str | None) Token payload
    """

    __slots__ = ("value",)

    def __init__(self, value=None):
        object.__setattr__(self, "value", value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} token is immutable")

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return type(self) is type(other) and self.value == other.value

    def __hash__(self):
        return hash((type(self), self.value))

    def __repr__(self):
        return type(self).__name__

    def is_(self, token_type):
        """(bool) True if this token is of the given token class."""
        return type(self) is token_type

    def try_as(self, token_type):
        """Return this token if it is of the given class, else None."""
        return self if type(self) is token_type else None


class _ValueToken(Token):
    """Token carrying a payload, shown as `Name{value}`."""

    __slots__ = ()

    def __init__(self, value):
        super().__init__(value)

    def __repr__(self):
        return f"{type(self).__name__}{{{self.value}}}"


class Number(_ValueToken):
    """Integer literal."""

    __slots__ = ()


class Id(_ValueToken):
    """Identifier that is not a reserved word."""

    __slots__ = ()


class Char(_ValueToken):
    """Single punctuation character such as `:` or `(`."""

    __slots__ = ()


class String(_ValueToken):
    """String literal with escapes already decoded."""

    __slots__ = ()


class Class(Token):
    __slots__ = ()


class Return(Token):
    __slots__ = ()


class If(Token):
    __slots__ = ()


class Else(Token):
    __slots__ = ()


class Def(Token):
    __slots__ = ()


class Newline(Token):
    """End of a logical line."""

    __slots__ = ()


class Print(Token):
    __slots__ = ()


class Indent(Token):
    """Indentation grew by one level (two spaces)."""

    __slots__ = ()


class Dedent(Token):
    """Indentation shrank by one level."""

    __slots__ = ()


class Eof(Token):
    """End of input, repeated forever once reached."""

    __slots__ = ()


class And(Token):
    __slots__ = ()


class Or(Token):
    __slots__ = ()


class Not(Token):
    __slots__ = ()


class Eq(Token):
    __slots__ = ()


class NotEq(Token):
    __slots__ = ()


class LessOrEq(Token):
    __slots__ = ()


class GreaterOrEq(Token):
    __slots__ = ()


class None_(Token):
    __slots__ = ()

    def __repr__(self):
        return "None"


class True_(Token):
    __slots__ = ()

    def __repr__(self):
        return "True"


class False_(Token):
    __slots__ = ()

    def __repr__(self):
        return "False"
