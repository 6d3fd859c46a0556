import pytest

from lispreter.errors import LispSyntaxError, NodeInitError
from lispreter.reader.lexer import lex
from lispreter.reader.parser import TokenStream, read, read_one
from lispreter.types.node import NIL, T, Atom, SExpression


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("atom", "a")]),
        ("'a", [("quote", "'"), ("atom", "a")]),
        ("(a b c)", [("lparen", "("), ("atom", "a"), ("atom", "b"), ("atom", "c"), ("rparen", ")")]),
        ("(PLUS -1 +2)", [("lparen", "("), ("atom", "PLUS"), ("atom", "-1"), ("atom", "+2"), ("rparen", ")")]),
        (" ; comment\n a b", [("atom", "a"), ("atom", "b")]),
        ("a;trailing\n", [("atom", "a")]),
        ("((λ))", [("lparen", "("), ("lparen", "("), ("atom", "λ"), ("rparen", ")"), ("rparen", ")")]),
        ("   ", []),
    ]
)
def test_lexer_basic(source, expected):
    assert list(lex(source)) == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("nil", NIL),
        ("NIL", NIL),
        ("()", NIL),
        ("t", T),
        ("123", Atom(123)),
        ("+5", Atom(5)),
        ("-45", Atom(-45)),
        ("abc", Atom("abc")),
        ("'a", SExpression(Atom("QUOTE"), SExpression(Atom("a")))),
    ]
)
def test_parse_atoms(source, expected):
    assert read_one(source) == expected


@pytest.mark.parametrize(
    "source, rendered",
    [
        ("(A B C)", "(A B C)"),
        ("( A   (B  C)\n D )", "(A (B C) D)"),
        ("(A () B)", "(A NIL B)"),
        ("(+1 -1)", "(1 -1)"),
        ("'(A 'B)", "(QUOTE (A (QUOTE B)))"),
    ]
)
def test_parse_lists(source, rendered):
    assert str(read_one(source)) == rendered


def test_parse_all_is_lazy_and_ordered():
    forms = read("(A) B ; skip\n (C D)")
    assert str(next(forms)) == "(A)"
    assert [str(f) for f in forms] == ["B", "(C D)"]


def test_parse_expr_returns_none_at_end():
    stream = TokenStream(lex("X"))
    assert stream.parse_expr() == Atom("X")
    assert stream.parse_expr() is None


@pytest.mark.parametrize("source", ["(A B", ")", "'", "(A))"])
def test_syntax_errors(source):
    with pytest.raises(LispSyntaxError):
        list(read(source))


def test_invalid_atoms_are_rejected():
    with pytest.raises(NodeInitError):
        read_one("(A-B)")
    with pytest.raises(LispSyntaxError):
        read_one("  ")
