import pytest

from lispreter import errors
from lispreter.reader.parser import read_one
from lispreter.types.function import LambdaFn, UserDef, convert_params
from lispreter.types.node import NIL, Atom


def make(formals, body="(PLUS 1 2)", name="F"):
    return UserDef(name, read_one(formals), read_one(body))


# ------------------ Definition ------------------

def test_params_are_parsed_in_order():
    fn = make("(X Y Z)")
    assert fn.params == ("X", "Y", "Z")
    assert fn.arity == 3
    assert fn.label == "F"


def test_nil_formals_mean_no_params():
    assert make("NIL").params == ()
    assert make("()").params == ()
    assert convert_params(NIL) == ()


def test_duplicate_formals():
    with pytest.raises(errors.DuplicateParameterError):
        make("(X X)")
    with pytest.raises(errors.DuplicateParameterError):
        make("(A B A)")


@pytest.mark.parametrize("formals", ["(1)", "(X 2)", "((A))", "(X (Y))"])
def test_non_symbol_formals(formals):
    with pytest.raises(errors.InvalidParameterError):
        make(formals)


def test_formals_must_be_a_list():
    with pytest.raises(errors.FuncDefError, match="parameters"):
        make("X")


def test_body_must_be_a_list_or_nil():
    with pytest.raises(errors.FuncDefError, match="body"):
        make("(X)", body="X")
    assert make("(X)", body="NIL").body == NIL


def test_definition_errors_share_a_base():
    assert issubclass(errors.DuplicateParameterError, errors.FuncDefError)
    assert issubclass(errors.InvalidParameterError, errors.FuncDefError)
    assert issubclass(errors.TooFewArgumentsError, errors.FuncDefError)
    assert issubclass(errors.TooManyArgumentsError, errors.FuncDefError)
    assert issubclass(errors.FuncDefError, errors.LispreterError)


def test_lambda_is_keyed_by_formals():
    formals = read_one("(X)")
    fn = LambdaFn(formals, read_one("(PLUS X 1)"))
    assert fn.key == formals
    assert fn.label == "lambda"
    assert str(fn) == "(lambda (X) (PLUS X 1))"


# ------------------ Binding ------------------

def test_exact_arity_binds_in_order(env):
    fn = make("(X Y)")
    assert fn.bind(read_one("(1 2)"), env) == {"X": Atom(1), "Y": Atom(2)}


def test_too_few_actuals(env):
    with pytest.raises(errors.TooFewArgumentsError, match="F"):
        make("(X Y)").bind(read_one("(1)"), env)


def test_too_many_actuals(env):
    with pytest.raises(errors.TooManyArgumentsError, match="F"):
        make("(X Y)").bind(read_one("(1 2 3)"), env)


def test_nil_actuals(env):
    assert make("NIL").bind(NIL, env) == {}
    with pytest.raises(errors.TooFewArgumentsError):
        make("(X)").bind(NIL, env)


def test_atom_actuals(env):
    assert make("NIL").bind(Atom(5), env) == {}
    with pytest.raises(errors.InvalidActualsError):
        make("(X)").bind(Atom(5), env)


def test_actuals_are_evaluated(env):
    env.substitute({"Y": Atom(10)})
    table = make("(A B)").bind(read_one("((PLUS 1 2) Y)"), env)
    assert table == {"A": Atom(3), "B": Atom(10)}


def test_eval_scopes_bindings(env):
    env.substitute({"X": Atom("OUTER")})
    fn = make("(X)", body="(TIMES X X)")
    assert fn.eval(read_one("(7)"), env) == Atom(49)
    assert env.get_variable_value("X") == Atom("OUTER")


def test_eval_restores_bindings_on_error(env):
    fn = make("(X)", body="(PLUS X UNKNOWN)")
    with pytest.raises(errors.UndefinedVariableError):
        fn.eval(read_one("(1)"), env)
    assert not env.is_defined_v("X")
