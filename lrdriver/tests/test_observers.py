import unittest

import lrdriver
from lrdriver.tests.test_basic import Recorder


class SymbolRecorder(lrdriver.Observer):
    """Enters every identifier it sees into the shared symbol table."""

    def on_shift(self, state, token):
        if token.kind == "id":
            self.symbol_table.setdefault(token.value, len(self.symbol_table))

    def on_reduce(self, state, production):
        pass

    def on_accept(self, state):
        self.symbol_table["<accepted>"] = state


class TestObserverRegistry(unittest.TestCase):
    def test_symbol_table_bound_on_register(self):
        symtab = {}
        registry = lrdriver.ObserverRegistry(symtab)
        observer = Recorder()
        self.assertIsNone(observer.symbol_table)

        registry.register(observer)
        self.assertIs(observer.symbol_table, symtab)
        self.assertEqual(len(registry), 1)
        self.assertEqual(list(registry), [observer])

    def test_fan_out_order(self):
        log = []
        registry = lrdriver.ObserverRegistry()
        for name in "ABC":
            registry.register(Recorder(name=name, log=log))

        registry.shift(0, lrdriver.Token("a"))
        registry.accept(1)

        self.assertEqual(
            [entry[:2] for entry in log],
            [
                ("A", "shift"),
                ("B", "shift"),
                ("C", "shift"),
                ("A", "accept"),
                ("B", "accept"),
                ("C", "accept"),
            ],
        )


class TestParserObservers(unittest.TestCase):
    def test_registration_order_is_notification_order(self):
        from lrdriver.tests.specs import b

        log = []
        parser = lrdriver.Lr()
        parser.register_observer(Recorder(name="A", log=log))
        parser.register_observer(Recorder(name="B", log=log))
        parser.load_tokens(b.tokens("a + ( b * c )"))
        parser.load_table(b.table)
        parser.run()

        self.assertEqual(len(log) % 2, 0)
        self.assertEqual({entry[0] for entry in log[0::2]}, {"A"})
        self.assertEqual({entry[0] for entry in log[1::2]}, {"B"})
        self.assertEqual(
            [entry[1:] for entry in log[0::2]],
            [entry[1:] for entry in log[1::2]],
        )
        self.assertEqual(log[-1], ("B", "accept", 1))

    def test_shared_symbol_table(self):
        from lrdriver.tests.specs import b

        symtab = {}
        parser = lrdriver.Lr(symtab)
        observer = SymbolRecorder()
        parser.register_observer(observer)
        self.assertIs(parser.symbol_table, symtab)
        self.assertIs(observer.symbol_table, symtab)

        parser.load_tokens(b.tokens("x * y + x"))
        parser.load_table(b.table)
        parser.run()

        self.assertEqual(symtab, {"x": 0, "y": 1, "<accepted>": 1})

    def test_late_registration_sees_later_actions_only(self):
        from lrdriver.tests.specs import a

        late = Recorder()

        class Registrar(Recorder):
            def on_shift(self, state, token):
                super().on_shift(state, token)
                self.parser.register_observer(late)

        parser = lrdriver.Lr()
        early = Registrar(parser)
        parser.register_observer(early)
        parser.load_tokens(a.tokens("a"))
        parser.load_table(a.table)
        parser.run()

        self.assertEqual(
            [e[0] for e in early.log], ["shift", "reduce", "accept"]
        )
        self.assertEqual([e[0] for e in late.log], ["reduce", "accept"])

    def test_production_collector(self):
        from lrdriver.tests.specs import e

        collector = lrdriver.ProductionCollector()
        parser = lrdriver.Lr()
        parser.register_observer(collector)
        parser.load_tokens([lrdriver.Token("a"), lrdriver.Token.eof()])
        parser.load_table(e.table)
        parser.run()

        self.assertEqual(collector.productions, [e.p2, e.p1])
        self.assertEqual(collector.lines(), ["A -> ε", "S -> A a"])


if __name__ == "__main__":
    unittest.main()
