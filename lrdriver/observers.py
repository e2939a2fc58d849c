"""
Observer bookkeeping for the parser: the registry that fans notifications
out in registration order, and a small observer that records reductions.
"""

from __future__ import annotations

from typing import Any, Iterator

from lrdriver.ast import Token
from lrdriver.grammar import Production, State
from lrdriver.interfaces import Observer


class ObserverRegistry:
    """
    Ordered collection of observers.  Registration order is notification
    order for every kind of action alike.
    """

    def __init__(self, symbol_table: Any = None) -> None:
        self.symbol_table = symbol_table
        self._observers: list[Observer] = []

    def __len__(self) -> int:
        return len(self._observers)

    def __iter__(self) -> Iterator[Observer]:
        return iter(self._observers)

    def register(self, observer: Observer) -> None:
        self._observers.append(observer)
        observer.set_symbol_table(self.symbol_table)

    def shift(self, state: State, token: Token) -> None:
        for observer in tuple(self._observers):
            observer.on_shift(state, token)

    def reduce(self, state: State, production: Production) -> None:
        for observer in tuple(self._observers):
            observer.on_reduce(state, production)

    def accept(self, state: State) -> None:
        for observer in tuple(self._observers):
            observer.on_accept(state)


class ProductionCollector(Observer):
    """Records every production the parser reduces by, in order."""

    def __init__(self) -> None:
        self.productions: list[Production] = []

    def on_shift(self, state: State, token: Token) -> None:
        pass

    def on_reduce(self, state: State, production: Production) -> None:
        self.productions.append(production)

    def on_accept(self, state: State) -> None:
        pass

    def lines(self) -> list[str]:
        return [str(production) for production in self.productions]
