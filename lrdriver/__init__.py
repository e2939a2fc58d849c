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
The lrdriver module implements the runtime half of an LR(1) parser: a
table-driven shift-reduce driver that consumes a token stream according to
a precomputed action/goto table.  Building the table is somebody else's
job; any object implementing the Table interface (or the dict-backed
LRTable provided here) will do.

The driver keeps a symbol stack and a parallel state stack.  At every step
it looks up the action for the state on top of the state stack and the
pending lookahead token, and then:

  shift  : pushes the token and the target state, consuming the token.
  reduce : pops one frame per symbol in the production body, then pushes
           the production's head together with the goto state.
  accept : stops; the start symbol is the only symbol left on the stack.
  error  : raises ParseError.  There is no error recovery.

Semantic processing is kept out of the driver loop.  Instead, Observer
instances are registered with the parser and are notified of each shift,
reduce and accept, in registration order, *before* the stacks change.  Each
observer receives the parser's shared symbol table when it registers:

    parser = lrdriver.Lr(symbol_table)
    parser.register_observer(collector)
    parser.load_tokens(tokens)
    parser.load_table(table)
    parser.run()

Tables are never modified by the driver, so a single table may be shared
by any number of parser instances, each of which drives a single parse.
"""

from __future__ import annotations


__all__ = (
    "AcceptAction",
    "Action",
    "AnyException",
    "EndOfInput",
    "ErrorAction",
    "Lr",
    "LRTable",
    "MalformedTableError",
    "NonTerminal",
    "NontermSymbol",
    "Observer",
    "ObserverRegistry",
    "ParseError",
    "Parser",
    "ParsingError",
    "Production",
    "ProductionCollector",
    "ReduceAction",
    "ShiftAction",
    "Symbol",
    "Table",
    "Token",
    "TokenSymbol",
    "TypeMismatch",
    "__version__",
)

from lrdriver._version import __version__
from lrdriver.ast import (
    EndOfInput,
    NonTerminal,
    NontermSymbol,
    Symbol,
    Token,
    TokenSymbol,
)
from lrdriver.errors import (
    AnyException,
    MalformedTableError,
    ParseError,
    ParsingError,
    TypeMismatch,
)
from lrdriver.grammar import (
    AcceptAction,
    Action,
    ErrorAction,
    Production,
    ReduceAction,
    ShiftAction,
)
from lrdriver.interfaces import Observer, Parser, Table
from lrdriver.observers import ObserverRegistry, ProductionCollector
from lrdriver.table import LRTable
from lrdriver.lrparser import Lr
