# S -> a
#
# state | a    $      | S
# ------+-------------+---
#   0   | s1          | 2
#   1   |      r(S→a) |
#   2   |      acc    |
from lrdriver import (
    AcceptAction,
    LRTable,
    NonTerminal,
    Production,
    ReduceAction,
    ShiftAction,
    Token,
)


S = NonTerminal("S")

p1 = Production(S, ["a"], 1)

table = LRTable(
    {
        (0, "a"): ShiftAction(1),
        (1, "$"): ReduceAction(p1),
        (2, "$"): AcceptAction(),
    },
    {
        (0, S): 2,
    },
    0,
)


def tokens(text):
    return [Token(kind) for kind in text.split()] + [Token.eof()]
