from lispreter.reader.parser import read_one
from lispreter.types.node import NIL, Atom


def test_eval_returns_last_result(interp):
    assert interp.eval("(DEFUN INC (X) (PLUS X 1)) (INC 4)") == Atom(5)


def test_eval_of_empty_source_is_nil(interp):
    assert interp.eval("") is NIL
    assert interp.eval("; only a comment\n") is NIL


def test_iter_eval_yields_one_result_per_form(interp):
    results = [str(r) for r in interp.iter_eval("(PLUS 1 2) 'A (CONS 1 NIL)")]
    assert results == ["3", "A", "(1)"]


def test_definitions_persist_across_calls(interp):
    interp.eval("(DEFUN TWICE (X) (TIMES 2 X))")
    assert interp.eval_form(read_one("(TWICE 21)")) == Atom(42)


def test_print_result_writes_rendering_line(interp, output):
    interp.print_result(interp.eval_form(read_one("'(A (B) 3)")))
    interp.print_result(NIL)
    assert output.getvalue() == "(A (B) 3)\nNIL\n"
