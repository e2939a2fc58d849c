"""
The lrdriver module implements the following exception classes:

  * AnyException
  * ParsingError
  * ParseError
  * MalformedTableError
  * TypeMismatch
"""

from __future__ import annotations

from typing import Any, Hashable, Sequence


# ============================================================================
# Begin exceptions.
#
class AnyException(Exception):
    """
    Top-level class for all exceptions thrown within the lrdriver module.
    """


class ParsingError(AnyException):
    """
    Top level parsing exception class, from which we derive all exceptions
    that are caused by the input being fed to a parser, as opposed to
    defects in the parser's configuration.
    """


class ParseError(ParsingError):
    """
    Parser syntax error.  ParseError arises when the transition table yields
    an error action for the current state and lookahead token, i.e. the
    token stream does not belong to the language encoded by the table.
    """

    def __init__(
        self,
        message: str,
        state: Hashable | None = None,
        token: Any = None,
        expected: Sequence[str] = (),
    ) -> None:
        super().__init__(message)
        self.state = state
        self.token = token
        self.expected = tuple(expected)


class MalformedTableError(AnyException):
    """
    Table consistency error.  MalformedTableError arises when the transition
    table cannot drive the parse any further for reasons that are not the
    input's fault: a missing goto entry, a reduction deeper than the stack,
    an unknown action kind, or input running out before accept.
    """

    def __init__(
        self,
        message: str,
        state: Hashable | None = None,
        symbol: Any = None,
    ) -> None:
        super().__init__(message)
        self.state = state
        self.symbol = symbol


class TypeMismatch(AnyException, TypeError):
    """
    Symbol variant error.  TypeMismatch arises when a Symbol accessor is
    asked for the variant that the symbol does not hold.
    """


#
# End exceptions.
# ============================================================================
