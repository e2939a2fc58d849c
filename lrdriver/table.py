"""
A ready-made transition table backed by plain dictionaries.  Table
construction itself happens elsewhere; LRTable merely holds the result in a
read-only form that any number of parsers can share.
"""

from __future__ import annotations

import types
from typing import Dict, Mapping

from lrdriver.ast import NonTerminal
from lrdriver.grammar import Action, ErrorAction, State
from lrdriver.interfaces import Table


ActionState = Dict[str, Action]
GotoState = Dict[NonTerminal, State]

_error = ErrorAction()


class LRTable(Table):
    """
    Action entries are keyed by (state, terminal kind) and goto entries by
    (state, non-terminal).  A missing action entry reads as an error action
    and a missing goto entry reads as None.
    """

    def __init__(
        self,
        actions: Mapping[tuple[State, str], Action],
        gotos: Mapping[tuple[State, NonTerminal], State],
        initial: State,
    ) -> None:
        self._actions = types.MappingProxyType(dict(actions))
        self._gotos = types.MappingProxyType(dict(gotos))
        self._initial = initial

    @classmethod
    def from_rows(
        cls,
        action_rows: Mapping[State, ActionState],
        goto_rows: Mapping[State, GotoState],
        initial: State,
    ) -> LRTable:
        actions: dict[tuple[State, str], Action] = {}
        for state, row in action_rows.items():
            for kind, action in row.items():
                actions[(state, kind)] = action
        gotos: dict[tuple[State, NonTerminal], State] = {}
        for state, grow in goto_rows.items():
            for nonterm, target in grow.items():
                gotos[(state, nonterm)] = target
        return cls(actions, gotos, initial)

    @property
    def actions(self) -> Mapping[tuple[State, str], Action]:
        return self._actions

    @property
    def gotos(self) -> Mapping[tuple[State, NonTerminal], State]:
        return self._gotos

    def action(self, state: State, kind: str) -> Action:
        return self._actions.get((state, kind), _error)

    def goto(self, state: State, nonterm: NonTerminal) -> State | None:
        return self._gotos.get((state, nonterm))

    def initial_state(self) -> State:
        return self._initial

    def expected(self, state: State) -> tuple[str, ...]:
        """Terminal kinds with a non-error action in the given state."""
        return tuple(
            sorted(
                kind
                for (s, kind), action in self._actions.items()
                if s == state and not isinstance(action, ErrorAction)
            )
        )
