import pytest

from scm.evaluation.evaluator import evaluate
from scm.types.environment import Environment
from scm.types.procedure import Closure, Primitive
from scm.types.symbol import Symbol
from scm.reader.parser import read
from scm.types import errors
from scm.evaluation.special_forms.set_form import OK


# -----------------------------------------------------
# Atoms
# -----------------------------------------------------

def test_self_evaluating_atoms(env):
    assert evaluate(1.0, env) == 1.0
    assert evaluate(3.14, env) == 3.14
    assert evaluate(True, env) is True
    assert evaluate(False, env) is False


def test_empty_list_evaluates_to_itself(env):
    assert evaluate([], env) == []


def test_boolean_literals_come_from_global_bindings(run):
    assert run("#t") is True
    assert run("#f") is False


def test_symbol_lookup(env):
    env.define(Symbol("x"), 42.0)
    assert evaluate(Symbol("x"), env) == 42.0
    with pytest.raises(errors.ScmUnboundSymbol):
        evaluate(Symbol("z"), env)


@pytest.mark.parametrize("value", [Primitive("id", lambda args: args), "text", 3, None])
def test_unknown_expression_type(env, value):
    with pytest.raises(errors.ScmUnknownForm):
        evaluate(value, env)


def test_closure_is_not_an_expression(env):
    fn = Closure([Symbol("x")], Symbol("x"), env)
    with pytest.raises(errors.ScmUnknownForm):
        evaluate(fn, env)


# -----------------------------------------------------
# quote
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(quote x)", Symbol("x")),
        ("(quote unbound-thing)", Symbol("unbound-thing")),
        ("(quote (1 2 3))", [1.0, 2.0, 3.0]),
        ("(quote (a (b c)))", [Symbol("a"), [Symbol("b"), Symbol("c")]]),
        ("(quote ())", []),
        ("(quote #t)", Symbol("#t")),
        ("(quote (+ 1 2))", [Symbol("+"), 1.0, 2.0]),
    ],
)
def test_quote(run, source, expected):
    assert run(source) == expected


def test_quote_returns_syntax_verbatim(env):
    expr = read("(quote (a b))")
    assert evaluate(expr, env) is expr[1]


def test_quote_arity(run):
    with pytest.raises(errors.ScmArityError):
        run("(quote a b)")


# -----------------------------------------------------
# if
# -----------------------------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if #t 1 2)", 1.0),
        ("(if #f 1 2)", 2.0),
        ("(if (<= 1 2) (quote yes) (quote no))", Symbol("yes")),
        ("(if (<= 3 2) (quote yes) (quote no))", Symbol("no")),
    ],
)
def test_if(run, source, expected):
    assert run(source) == expected


def test_if_evaluates_only_the_chosen_branch(run):
    assert run("(if #t 1 undefined-symbol)") == 1.0
    assert run("(if #f undefined-symbol 2)") == 2.0


@pytest.mark.parametrize("test", ["0", "1", "(quote ())", "(quote x)"])
def test_if_requires_boolean_test(run, test):
    with pytest.raises(errors.ScmTypeError):
        run(f"(if {test} 1 2)")


@pytest.mark.parametrize("source", ["(if #t 1)", "(if #t)", "(if #t 1 2 3)"])
def test_if_arity(run, source):
    with pytest.raises(errors.ScmArityError):
        run(source)


# -----------------------------------------------------
# define and set!
# -----------------------------------------------------

def test_define_then_lookup(run):
    assert run("(define x 5)") == OK
    assert run("x") == 5.0


def test_define_overwrites(run):
    run("(define x 5)")
    run("(define x 6)")
    assert run("x") == 6.0


def test_define_is_local_to_the_current_frame(env, run):
    run("(define x 1)")
    run("(define f (lambda (y) (begin (define x y) x)))")
    assert run("(f 9)") == 9.0
    assert run("x") == 1.0


def test_define_requires_symbol(run):
    with pytest.raises(errors.ScmTypeError):
        run("(define (f x) x)")
    with pytest.raises(errors.ScmArityError):
        run("(define x)")


def test_set_rebinds_existing(run):
    run("(define x 1)")
    assert run("(set! x 2)") == OK
    assert run("x") == 2.0


def test_set_unbound_fails(env, run):
    with pytest.raises(errors.ScmUnboundSymbol):
        run("(set! nope 1)")
    assert env.find(Symbol("nope")) is None


def test_set_mutates_enclosing_frame(env, run):
    run("(define counter 0)")
    run("(define bump (lambda () (set! counter (+ counter 1))))")
    run("(bump)")
    run("(bump)")
    assert run("counter") == 2.0


def test_set_evaluates_value_before_lookup_failure(run):
    with pytest.raises(errors.ScmUnboundSymbol, match="missing"):
        run("(set! x missing)")


# -----------------------------------------------------
# lambda and begin
# -----------------------------------------------------

def test_lambda_builds_closure_without_evaluating_body(env, run):
    fn = run("(lambda (a b) (undefined a b))")
    assert isinstance(fn, Closure)
    assert fn.params == [Symbol("a"), Symbol("b")]
    assert fn.env is env


def test_lambda_application(run):
    assert run("((lambda (a b) (+ a b)) 2 3)") == 5.0
    assert run("((lambda () 7))") == 7.0


def test_variadic_lambda(run):
    assert run("((lambda z z) 1 2 3)") == [1.0, 2.0, 3.0]
    assert run("((lambda z z))") == []


@pytest.mark.parametrize(
    "source,error",
    [
        ("(lambda (x))", errors.ScmArityError),
        ("(lambda (x) x x)", errors.ScmArityError),
        ("(lambda (1) x)", errors.ScmTypeError),
        ("(lambda 1 x)", errors.ScmTypeError),
    ],
)
def test_malformed_lambda(run, source, error):
    with pytest.raises(error):
        run(source)


def test_begin_sequences_side_effects(run):
    assert run("(begin (define a 1) (set! a (+ a 1)) (+ a 10))") == 12.0
    assert run("(begin)") == []


def test_arguments_evaluated_left_to_right(run):
    run("(define trace (quote ()))")
    run("(define note (lambda (v) (begin (set! trace (cons v trace)) v)))")
    run("((lambda (a b c) a) (note 1) (note 2) (note 3))")
    assert run("trace") == [3.0, [2.0, [1.0, []]]]


def test_special_form_names_can_still_be_bound(run):
    # special forms are recognised by head position only
    run("(define if 5)")
    assert run("if") == 5.0
    assert run("(if #t 1 2)") == 1.0


def test_evaluation_does_not_mutate_syntax(env):
    expr = read("(begin (define f (lambda z z)) (f 1 2))")
    snapshot = read("(begin (define f (lambda z z)) (f 1 2))")
    evaluate(expr, env)
    evaluate(expr, env)
    assert expr == snapshot


def test_unknown_procedure_type(run):
    with pytest.raises(errors.ScmUnknownForm):
        run("(1 2 3)")
    with pytest.raises(errors.ScmUnknownForm):
        run("((quote f) 1)")
