import pytest

from lispreter import errors
from lispreter.evaluation.evaluator import evaluate
from lispreter.reader.parser import read_one
from lispreter.types.node import NIL, T, Atom

FACT = """
(DEFUN FACT (N)
  (COND ((EQ N 0) 1)
        (T (TIMES N (FACT (MINUS N 1))))))
"""

LEN = """
(DEFUN LEN (L)
  (COND ((NULL L) 0)
        (T (PLUS 1 (LEN (CDR L))))))
"""


def run(interp, code):
    return str(interp.eval(code))


# ------------------ Atoms ------------------

def test_self_evaluating_atoms(env):
    assert evaluate(Atom(5), env) == Atom(5)
    assert evaluate(T, env) is T
    assert evaluate(NIL, env) is NIL


def test_symbol_lookup(env):
    env.substitute({"X": Atom(42)})
    assert evaluate(Atom("X"), env) == Atom(42)
    with pytest.raises(errors.UndefinedVariableError):
        evaluate(Atom("Z"), env)


# ------------------ Special forms ------------------

def test_quote(interp):
    assert run(interp, "(QUOTE (A B C))") == "(A B C)"
    assert run(interp, "'(A (B))") == "(A (B))"
    assert run(interp, "(quote x)") == "x"
    with pytest.raises(errors.EvaluationError):
        interp.eval("(QUOTE A B)")


def test_cond(interp):
    assert run(interp, "(COND ((NULL NIL) 1) (T 2))") == "1"
    assert run(interp, "(COND ((ATOM '(A)) 1) (T 2))") == "2"
    with pytest.raises(errors.EvaluationError):
        interp.eval("(COND (NIL 1))")
    with pytest.raises(errors.EvaluationError):
        interp.eval("(COND (T 1 2))")


def test_defun_returns_name(interp):
    assert run(interp, "(DEFUN SQUARE (X) (TIMES X X))") == "SQUARE"
    assert run(interp, "(SQUARE 9)") == "81"


def test_defun_rejects_lambda_name(interp):
    with pytest.raises(errors.FuncDefError):
        interp.eval("(DEFUN LAMBDA (X) (PLUS X 1))")


def test_defun_rejects_atom_body(interp):
    with pytest.raises(errors.FuncDefError):
        interp.eval("(DEFUN ID (X) X)")


def test_let_scopes_bindings(interp):
    assert run(interp, "(LET ((A 1) (B 2)) (PLUS A B))") == "3"
    assert not interp.env.is_defined_v("A")
    with pytest.raises(errors.UndefinedVariableError):
        interp.eval("A")


def test_let_restores_shadowed_binding(interp):
    interp.eval("(DEFUN F (A) (PLUS (LET ((A 10)) (TIMES A 2)) A))")
    assert run(interp, "(F 1)") == "21"


def test_let_values_see_outer_scope(interp):
    assert run(interp, "(LET ((A 2)) (LET ((A 3) (B A)) (PLUS A B)))") == "5"


# ------------------ Function application ------------------

def test_recursive_functions(interp):
    interp.eval(FACT)
    interp.eval(LEN)
    assert run(interp, "(FACT 5)") == "120"
    assert run(interp, "(FACT 0)") == "1"
    assert run(interp, "(LEN '(A B C))") == "3"


def test_arity_is_strict(interp):
    interp.eval("(DEFUN ADD (X Y) (PLUS X Y))")
    assert run(interp, "(ADD 1 2)") == "3"
    with pytest.raises(errors.TooFewArgumentsError, match="ADD"):
        interp.eval("(ADD 1)")
    with pytest.raises(errors.TooManyArgumentsError, match="ADD"):
        interp.eval("(ADD 1 2 3)")


def test_bindings_do_not_leak(interp):
    interp.eval("(DEFUN ADD (X Y) (PLUS X Y))")
    interp.eval("(ADD 1 2)")
    assert interp.env.get_variables() == {}


def test_dynamic_scope(interp):
    interp.eval("(DEFUN GETY NIL (PLUS Y 0))")
    interp.eval("(DEFUN WITHY (Y) (GETY))")
    assert run(interp, "(WITHY 4)") == "4"


def test_undefined_function(interp):
    with pytest.raises(errors.UndefinedFunctionError, match="FOO"):
        interp.eval("(FOO 1)")


@pytest.mark.parametrize("code", ["(1 2)", "(T 1)", "((QUOTE A) 1)"])
def test_non_function_heads(interp, code):
    with pytest.raises(errors.EvaluationError):
        interp.eval(code)


def test_user_functions_shadow_primitives(interp):
    interp.eval("(DEFUN plus (X) (TIMES X 10))")
    assert run(interp, "(plus 2)") == "20"
    assert run(interp, "(PLUS 2 3)") == "5"


# ------------------ Lambdas ------------------

def test_immediate_lambda_application(interp):
    assert run(interp, "((LAMBDA (X) (PLUS X 1)) 5)") == "6"
    assert run(interp, "((λ (X Y) (TIMES X Y)) 6 7)") == "42"
    assert run(interp, "((LAMBDA NIL (PLUS 1 1)))") == "2"


def test_lambda_evaluates_to_its_form(interp):
    assert run(interp, "(LAMBDA (X) (PLUS X 1))") == "(LAMBDA (X) (PLUS X 1))"
    assert interp.env.closure_state.next_node == read_one("(X)")


def test_lambda_arity(interp):
    with pytest.raises(errors.TooManyArgumentsError, match="lambda"):
        interp.eval("((LAMBDA (X) (PLUS X 1)) 5 6)")


def test_lambda_as_argument(interp):
    interp.eval("(DEFUN APPLY1 (F V) (F V))")
    assert run(interp, "(APPLY1 (LAMBDA (X) (TIMES X 2)) 21)") == "42"


def test_lambdas_with_same_formals_keep_their_bodies(interp):
    interp.eval("(DEFUN BOTH (F G V) (PLUS (F V) (G V)))")
    assert run(interp, "(BOTH (LAMBDA (X) (PLUS X 1)) (LAMBDA (X) (TIMES X 10)) 2)") == "23"


def test_lambda_with_bad_formals(interp):
    with pytest.raises(errors.DuplicateParameterError):
        interp.eval("((LAMBDA (X X) (PLUS X X)) 1 2)")
