from __future__ import annotations

import collections
from typing import Any, Iterable


from lrdriver.ast import Epsilon, Symbol, Token, TokenSymbol, NontermSymbol
from lrdriver.errors import MalformedTableError, ParseError
from lrdriver.grammar import (
    Production,
    State,
    ShiftAction,
    ReduceAction,
    AcceptAction,
    ErrorAction,
)
from lrdriver.interfaces import Observer, Parser, Table
from lrdriver.observers import ObserverRegistry


class Lr(Parser):
    """
    LR(1) parser driver.  The Lr class takes a token stream via
    load_tokens() and a transition table via load_table(), and then run()
    performs the shift-reduce algorithm over a symbol stack and a parallel
    state stack until the table accepts or rejects the input.

    Registered observers are notified of every shift, reduce and accept
    before the corresponding stack mutation takes place.  An Lr instance
    drives exactly one parse; the table is borrowed and never modified, so
    one table may serve many parsers.
    """

    _table: Table | None
    _tokens: collections.deque[Token]
    _symbols: list[Symbol]
    _states: list[State]

    def __init__(
        self, symbol_table: Any = None, verbose: bool = False
    ) -> None:
        self._observers = ObserverRegistry(symbol_table)
        self._table = None
        self._tokens = collections.deque()
        self._symbols = []
        self._states = []
        self._accepted = False
        self._ran = False
        self.verbose = verbose

    @property
    def symbol_table(self) -> Any:
        return self._observers.symbol_table

    @property
    def states(self) -> tuple[State, ...]:
        return tuple(self._states)

    @property
    def symbols(self) -> tuple[Symbol, ...]:
        """Symbol stack contents above the bottom-of-stack marker."""
        return tuple(self._symbols[1:])

    @property
    def pending(self) -> tuple[Token, ...]:
        """Tokens that have not been consumed yet."""
        return tuple(self._tokens)

    @property
    def accepted(self) -> bool:
        return self._accepted

    @property
    def start(self) -> Symbol | None:
        """The start symbol left on the stack once the input is accepted."""
        if not self._accepted:
            return None
        return self._symbols[-1]

    def register_observer(self, observer: Observer) -> None:
        self._observers.register(observer)

    def load_tokens(self, tokens: Iterable[Token]) -> None:
        self._tokens = collections.deque(tokens)
        self._symbols = [TokenSymbol(Epsilon())]

    def load_table(self, table: Table) -> None:
        self._table = table
        self._states = [table.initial_state()]

    def run(self) -> None:
        if self._table is None or not self._symbols:
            raise RuntimeError(
                "load_tokens() and load_table() must be called before run()"
            )
        if self._ran:
            raise RuntimeError("a parser instance can only run once")
        self._ran = True
        table = self._table

        while self._tokens:
            state = self._states[-1]
            token = self._tokens[0]
            action = table.action(state, token.kind)

            if self.verbose:
                self._printStack()
                print("INPUT: %r" % token)
                print("   --> %r" % action)

            if type(action) is ShiftAction:
                self._observers.shift(state, token)
                self._symbols.append(TokenSymbol(token))
                self._states.append(action.nextState)
                self._tokens.popleft()
            elif type(action) is ReduceAction:
                nextState = self._goto(table, action.production)
                self._observers.reduce(state, action.production)
                self._reduce(action.production, nextState)
            elif type(action) is AcceptAction:
                self._observers.accept(state)
                self._accepted = True
                return
            elif type(action) is ErrorAction:
                raise ParseError(
                    "Unexpected token: %r in state %r" % (token, state),
                    state,
                    token,
                    self._expected(table, state),
                )
            else:
                raise MalformedTableError(
                    "Unknown action %r in state %r" % (action, state), state
                )

        raise MalformedTableError(
            "Input exhausted without accept in state %r"
            % (self._states[-1],),
            self._states[-1],
        )

    def _goto(self, table: Table, production: Production) -> State:
        # Pure reads only: checked before observers hear of the reduction.
        nRhs = len(production)
        if nRhs >= len(self._symbols):
            raise MalformedTableError(
                "Cannot reduce %s with %d symbol(s) on the stack"
                % (production, len(self._symbols) - 1),
                self._states[-1],
                production.head,
            )

        top = self._states[-1 - nRhs]
        nextState = table.goto(top, production.head)
        if nextState is None:
            raise MalformedTableError(
                "No goto for %r in state %r" % (production.head, top),
                top,
                production.head,
            )
        return nextState

    def _reduce(self, production: Production, nextState: State) -> None:
        for _ in range(len(production)):
            self._states.pop()
            self._symbols.pop()

        self._symbols.append(NontermSymbol(production.head))
        self._states.append(nextState)

        if self.verbose:
            self._printStack()

    def _expected(self, table: Table, state: State) -> tuple[str, ...]:
        expected = getattr(table, "expected", None)
        if expected is None:
            return ()
        return tuple(expected(state))

    def _printStack(self) -> None:
        print("STACK:", end=" ")
        for sym in self._symbols:
            print("%r" % sym, end=" ")
        print()
        print("      ", end=" ")
        for sym, state in zip(self._symbols, self._states):
            print(
                "%r%s"
                % (state, (" " * (len("%r" % sym) - len("%r" % (state,))))),
                end=" ",
            )
        print()
