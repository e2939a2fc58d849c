"""
This module declares several structural ("duck typing") interfaces
that objects or classes can implement to be used in the library
"""

from __future__ import annotations

import abc
from typing import Any, Iterable

from lrdriver.ast import NonTerminal, Token
from lrdriver.grammar import Action, Production, State


class Table(abc.ABC):
    @abc.abstractmethod
    def action(self, state: State, kind: str) -> Action:
        raise NotImplementedError

    @abc.abstractmethod
    def goto(self, state: State, nonterm: NonTerminal) -> State | None:
        raise NotImplementedError

    @abc.abstractmethod
    def initial_state(self) -> State:
        raise NotImplementedError


class Observer(abc.ABC):
    """
    Observers are notified by the parser before it carries out each shift,
    reduce and accept action, so the parser's stacks still hold the pre-action
    configuration while the hooks run.  The symbol table is handed over once,
    when the observer is registered.
    """

    symbol_table: Any = None

    def set_symbol_table(self, symbol_table: Any) -> None:
        self.symbol_table = symbol_table

    @abc.abstractmethod
    def on_shift(self, state: State, token: Token) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def on_reduce(self, state: State, production: Production) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def on_accept(self, state: State) -> None:
        raise NotImplementedError


class Parser(abc.ABC):
    @abc.abstractmethod
    def load_tokens(self, tokens: Iterable[Token]) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def load_table(self, table: Table) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def run(self) -> None:
        raise NotImplementedError
