import pytest

from decafc.grammar import Grammar

g0 = Grammar(
    {
        "Start": [["E"]],
        "E": [["T"], ["E", "+", "T"]],
        "T": [["F"], ["T", "*", "F"]],
        "F": [["id"], ["(", "E", ")"]],
    }
)

g1 = Grammar(
    {
        "Start": [["S"]],
        "S": [["A"], ["B"]],
        "A": [["C"]],
        "B": [["D"]],
        "C": [["a"]],
        "D": [["b"]],
    }
)

g2 = Grammar(
    {
        "Start": [["S"]],
        "S": [["A", "b", "B", "a"], ["B", "a", "A", "b"]],
        "A": [[]],
        "B": [["b"]],
    }
)

g3 = Grammar(
    {
        "StmtBlock": [["VariableDecls", "Stmts"]],
        "VariableDecls": [[], ["VariableDecl", "VariableDecls"]],
        "Stmts": [[], ["Stmt", "Stmts"]],
    }
)

g4 = Grammar(
    {
        "A": [[], ["B", "C"]],
        "B": [[], ["A", "a"]],
        "C": [["b"], ["B", "c"]],
    }
)


@pytest.mark.parametrize(
    "grammar, terminals",
    [
        (g0, {"(", ")", "+", "*", "id"}),
        (g1, {"a", "b"}),
        (g2, {"a", "b"}),
    ],
)
def test_terminals_and_nonterminals(grammar, terminals):
    for symbol in grammar.types:
        assert grammar.is_terminal(symbol) == (symbol in terminals)


def test_end_marker_is_terminal():
    assert g0.is_terminal("$")


def test_unknown_symbol_raises():
    with pytest.raises(KeyError):
        g0.is_terminal("nope")
    with pytest.raises(KeyError):
        g0.produces_epsilon("nope")
    with pytest.raises(KeyError):
        g0.first_set("nope")


def test_produces_epsilon():
    for symbol in g0.types:
        assert not g0.produces_epsilon(symbol)
    for symbol in g2.types:
        assert g2.produces_epsilon(symbol) == (symbol == "A")
    assert g3.produces_epsilon("VariableDecls")
    assert g3.produces_epsilon("Stmts")
    assert g3.produces_epsilon("StmtBlock")
    assert g4.produces_epsilon("A")
    assert g4.produces_epsilon("B")
    assert not g4.produces_epsilon("C")


@pytest.mark.parametrize("grammar", [g0, g3, g4])
def test_first_sets_consist_of_terminals(grammar):
    for symbol in grammar.types:
        for t in grammar.first_set(symbol):
            assert grammar.is_terminal(t)


def test_first_sets():
    assert g2.first_set("S") == {"b"}
    assert len(g2.first_set("A")) == 0
    correct = {"a", "b", "c"}
    assert g4.first_set("A") == correct
    assert g4.first_set("B") == correct
    assert g4.first_set("C") == correct


def test_first_set_of_terminal_is_itself():
    assert g0.first_set("id") == {"id"}


def test_expression_grammar_first_sets():
    for symbol in ("Start", "E", "T", "F"):
        assert g0.first_set(symbol) == {"(", "id"}


def test_types_collects_every_symbol():
    assert g1.types == {"Start", "S", "A", "B", "C", "D", "a", "b"}


def test_rules_keep_given_order():
    assert g0.rules("F") == (("id",), ("(", "E", ")"))
    assert g2.rules("A") == ((),)
    assert g0.rules("id") == ()