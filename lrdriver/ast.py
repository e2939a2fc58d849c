"""
The classes in this module describe what lives on the parser's symbol
stack: terminal `Token` instances fed in by a lexer, `NonTerminal` grammar
symbols produced by reductions, and the `Symbol` union that wraps exactly
one of the two.
"""

from __future__ import annotations

from typing import Any

from mypy_extensions import mypyc_attr

from lrdriver.errors import TypeMismatch


EOF_KIND = "$"
EPSILON_KIND = "<e>"


@mypyc_attr(serializable=True, allow_interpreted_subclasses=True)
class Token:
    """
    Tokens are terminal symbols.  The parser is fed Token instances, which
    is what drives parsing.  Each token has a kind, which is the terminal
    name used for action table lookups, and an optional value carrying the
    lexeme or literal payload:

        Token("id", "x")
        Token("num", 42)
        Token("plus")

    The last token of every stream must be the end-of-input marker, see
    Token.eof().
    """

    def __init__(self, kind: str, value: Any = None) -> None:
        self.kind = kind
        self.value = value

    @classmethod
    def eof(cls) -> Token:
        return EndOfInput()

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Token):
            return self.kind == other.kind and self.value == other.value
        else:
            return NotImplemented

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        if self.value is None:
            return "<%s>" % self.kind
        return "<%s %r>" % (self.kind, self.value)


# <$>.
class EndOfInput(Token):
    def __init__(self) -> None:
        super().__init__(EOF_KIND)


# <e>.  Bottom of the symbol stack; never read from the input.
class Epsilon(Token):
    def __init__(self) -> None:
        super().__init__(EPSILON_KIND)


@mypyc_attr(serializable=True)
class NonTerminal:
    """
    Non-terminal symbols are never part of the input alphabet; they only
    appear on the symbol stack as the head of a reduced production.
    Non-terminals compare equal by name, so tables and productions may be
    built from separately constructed instances.
    """

    def __init__(self, name: str) -> None:
        self.name = name

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, NonTerminal):
            return self.name == other.name
        else:
            return NotImplemented

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return self.name

    __str__ = __repr__


@mypyc_attr(serializable=True, allow_interpreted_subclasses=True)
class Symbol:
    """
    A symbol stack entry.  Symbol itself is abstract; every instance is
    either a TokenSymbol or a NontermSymbol, never both and never neither.
    Code that needs a particular variant asks for it via as_token() or
    as_nonterminal(), which raise TypeMismatch for the other variant.
    """

    __slots__ = ()

    def __init__(self) -> None:
        if type(self) is Symbol:
            raise TypeError(
                "Symbol holds no variant; use Symbol.of(), TokenSymbol or "
                "NontermSymbol"
            )

    @staticmethod
    def of(value: Token | NonTerminal) -> Symbol:
        if isinstance(value, Token):
            return TokenSymbol(value)
        elif isinstance(value, NonTerminal):
            return NontermSymbol(value)
        raise TypeError(
            "a symbol wraps a Token or a NonTerminal, not %r" % (value,)
        )

    def is_token(self) -> bool:
        return False

    def is_nonterminal(self) -> bool:
        return False

    def as_token(self) -> Token:
        raise TypeMismatch("%r is not a token" % (self,))

    def as_nonterminal(self) -> NonTerminal:
        raise TypeMismatch("%r is not a non-terminal" % (self,))


class TokenSymbol(Symbol):
    __slots__ = ("token",)

    def __init__(self, token: Token) -> None:
        if not isinstance(token, Token):
            raise TypeError("expected a Token, got %r" % (token,))
        self.token = token

    def is_token(self) -> bool:
        return True

    def as_token(self) -> Token:
        return self.token

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, TokenSymbol):
            return self.token == other.token
        elif isinstance(other, Symbol):
            return False
        else:
            return NotImplemented

    def __hash__(self) -> int:
        return hash(self.token)

    def __repr__(self) -> str:
        return repr(self.token)


class NontermSymbol(Symbol):
    __slots__ = ("nonterminal",)

    def __init__(self, nonterminal: NonTerminal) -> None:
        if not isinstance(nonterminal, NonTerminal):
            raise TypeError("expected a NonTerminal, got %r" % (nonterminal,))
        self.nonterminal = nonterminal

    def is_nonterminal(self) -> bool:
        return True

    def as_nonterminal(self) -> NonTerminal:
        return self.nonterminal

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, NontermSymbol):
            return self.nonterminal == other.nonterminal
        elif isinstance(other, Symbol):
            return False
        else:
            return NotImplemented

    def __hash__(self) -> int:
        return hash(self.nonterminal)

    def __repr__(self) -> str:
        return repr(self.nonterminal)
