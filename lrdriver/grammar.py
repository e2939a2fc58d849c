# ============================================================================
# Copyright (c) 2007 Jason Evans <jasone@canonware.com>
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in
# all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
# ============================================================================
"""
This module contains the productions and table actions that a transition
table hands to the parser.
"""

from __future__ import annotations
from typing import Any, Hashable, Sequence, Union

from lrdriver.ast import NonTerminal


State = Hashable
BodySymbol = Union[str, NonTerminal]


class Production:
    """
    A grammar rule rewriting a head non-terminal into an ordered, possibly
    empty body.  Body entries are terminal kinds (str) or NonTerminal
    instances.  The body length is the number of stack frames a reduction
    by this production consumes.
    """

    def __init__(
        self,
        head: NonTerminal,
        body: Sequence[BodySymbol],
        index: int | None = None,
    ) -> None:
        self.head = head
        self.body: tuple[BodySymbol, ...] = tuple(body)
        self.index = index

    def __len__(self) -> int:
        return len(self.body)

    def __hash__(self) -> int:
        return hash((self.head, self.body))

    def __eq__(self, other: Any) -> bool:
        if type(other) is Production:
            return self.head == other.head and self.body == other.body
        else:
            return NotImplemented

    def __str__(self) -> str:
        if not self.body:
            return "%s -> ε" % self.head
        return "%s -> %s" % (self.head, " ".join(str(s) for s in self.body))

    def __repr__(self) -> str:
        return str(self)


class Action:
    """
    Abstract base class, subclassed by {Shift,Reduce,Accept,Error}Action."""

    kind = ""

    def __init__(self) -> None:
        pass

    def __eq__(self, other: Any) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(self.kind)

    def __repr__(self) -> str:
        return "[%s]" % self.kind


class ShiftAction(Action):
    """
    Shift action, with assocated nextState."""

    kind = "shift"

    def __init__(self, nextState: State) -> None:
        super().__init__()
        self.nextState = nextState

    def __repr__(self) -> str:
        return "[shift %r]" % (self.nextState,)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ShiftAction):
            return False
        if self.nextState != other.nextState:
            return False
        return True

    def __hash__(self) -> int:
        return hash((self.kind, self.nextState))


class ReduceAction(Action):
    """
    Reduce action, with associated production."""

    kind = "reduce"

    def __init__(self, production: Production) -> None:
        super().__init__()
        self.production = production

    def __repr__(self) -> str:
        return "[reduce %s]" % self.production

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ReduceAction):
            return False
        if self.production != other.production:
            return False
        return True

    def __hash__(self) -> int:
        return hash((self.kind, self.production))


class AcceptAction(Action):
    kind = "accept"


class ErrorAction(Action):
    kind = "error"
