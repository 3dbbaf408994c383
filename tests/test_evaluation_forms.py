import pytest

from crisp.errors import ArityError, CrispSyntaxError, CrispTypeError, UnboundSymbolError
from crisp.printer import to_string
from crisp.types import Closure, Nil, Symbol, make_list


# ------------------ quote ------------------

def test_quote_returns_form_unevaluated(run):
    assert run("(quote (+ 1 2))") == make_list([Symbol("+"), 1.0, 2.0])
    assert run("'undefined-symbol") == Symbol("undefined-symbol")


@pytest.mark.parametrize("source", ["(quote)", "(quote a b)"])
def test_quote_arity(run, source):
    with pytest.raises(ArityError):
        run(source)


# ------------------ if ------------------

def test_if_without_else_is_nil(run):
    assert run("(if false 1)") is Nil


@pytest.mark.parametrize("source", ["(if)", "(if true)", "(if true 1 2 3)"])
def test_if_arity(run, source):
    with pytest.raises(ArityError):
        run(source)


def test_if_only_evaluates_taken_branch(run):
    assert run("(if true 1 undefined-name)") == 1.0
    assert run("(if false undefined-name 2)") == 2.0


# ------------------ define ------------------

def test_define_returns_value(run):
    assert run("(define x 10)") == 10.0


def test_define_procedure_shorthand(run):
    square = run("(define (square x) (* x x))")
    assert isinstance(square, Closure)
    assert square.name == "square"
    assert run("(square 12)") == 144.0


def test_define_names_anonymous_closure(run):
    run("(define inc (lambda (x) (+ x 1)))")
    assert to_string(run("inc")) == "#<closure inc (x)>"


def test_define_alias_keeps_closure_name(run):
    run("(define (f x) x)")
    run("(define g f)")
    run("(define anon (car (list (lambda (y) y))))")
    assert to_string(run("g")) == "#<closure f (x)>"
    assert to_string(run("f")) == "#<closure f (x)>"
    assert to_string(run("anon")) == "#<closure lambda (y)>"
    run("(define h (fn (z) z))")
    assert to_string(run("h")) == "#<closure h (z)>"


def test_define_inside_body_is_local(run):
    run("(define x 1)")
    run("(define (f) (define x 2) x)")
    assert run("(f)") == 2.0
    assert run("x") == 1.0


@pytest.mark.parametrize(
    "source,error",
    [
        ("(define)", ArityError),
        ("(define x)", ArityError),
        ("(define x 1 2)", ArityError),
        ("(define 1 2)", CrispTypeError),
        ('(define "x" 2)', CrispTypeError),
        ("(define (1 x) x)", CrispTypeError),
    ]
)
def test_define_malformed(run, source, error):
    with pytest.raises(error):
        run(source)


def test_def_and_fn_aliases(run):
    run("(def twice (fn (x) (* 2 x)))")
    assert run("(twice 21)") == 42.0


# ------------------ lambda ------------------

def test_lambda_multiple_body_forms_run_in_order(run):
    assert run("((lambda (x) (define y (* x 2)) (+ y 1)) 5)") == 11.0


def test_lambda_empty_body_returns_nil(run):
    assert run("((lambda ()))") is Nil


def test_lambda_rest_parameter(run):
    assert run("((lambda (a . rest) rest) 1 2 3)") == make_list([2.0, 3.0])
    assert run("((lambda (a . rest) rest) 1)") is Nil
    assert run("((lambda args args) 1 2)") == make_list([1.0, 2.0])
    with pytest.raises(ArityError):
        run("((lambda (a b . rest) a) 1)")


@pytest.mark.parametrize(
    "source,error",
    [
        ("(lambda)", ArityError),
        ("(lambda (1) 1)", CrispTypeError),
        ("(lambda 5 1)", CrispTypeError),
        ("(lambda (x x) x)", CrispSyntaxError),
        ("(lambda (x . x) x)", CrispSyntaxError),
    ]
)
def test_lambda_malformed(run, source, error):
    with pytest.raises(error):
        run(source)


# ------------------ begin ------------------

def test_begin_returns_last_value(run):
    assert run("(begin 1 2 3)") == 3.0
    assert run("(progn 1 2)") == 2.0


def test_empty_begin_is_nil(run):
    assert run("(begin)") is Nil


def test_begin_keeps_earlier_definitions_when_later_form_fails(run):
    with pytest.raises(UnboundSymbolError):
        run("(begin (define kept 1) missing (define never 2))")
    assert run("kept") == 1.0
    with pytest.raises(UnboundSymbolError):
        run("never")


# ------------------ let / let* ------------------

def test_let_binds_in_child_frame(run):
    run("(define x 1)")
    assert run("(let ((x 2) (y 3)) (+ x y))") == 5.0
    assert run("x") == 1.0
    with pytest.raises(UnboundSymbolError):
        run("y")


def test_let_values_evaluated_in_outer_env(run):
    run("(define x 1)")
    assert run("(let ((x 2) (y x)) y)") == 1.0


def test_let_star_is_sequential(run):
    assert run("(let* ((x 2) (y (* x 10))) (+ x y))") == 22.0
    assert run("(let* () 7)") == 7.0


def test_outer_binding_visible_in_nested_scopes(run):
    run("(define base 100)")
    assert run("(let ((a 1)) (let ((b 2)) ((lambda (c) (+ base a b c)) 3)))") == 106.0


@pytest.mark.parametrize(
    "source,error",
    [
        ("(let)", ArityError),
        ("(let 5 1)", CrispTypeError),
        ("(let ((x)) x)", ArityError),
        ("(let ((x 1 2)) x)", ArityError),
        ("(let ((1 2)) 1)", CrispTypeError),
        ("(let ((x 1) (x 2)) x)", CrispSyntaxError),
    ]
)
def test_let_malformed(run, source, error):
    with pytest.raises(error):
        run(source)


# ------------------ set! ------------------

def test_set_mutates_owning_frame(run):
    run("(define counter 0)")
    run("(define (inc!) (set! counter (+ counter 1)))")
    run("(inc!)")
    assert run("(inc!)") == 2.0
    assert run("counter") == 2.0


def test_set_on_unbound_symbol_fails(run):
    with pytest.raises(UnboundSymbolError):
        run("(set! nowhere 1)")
    with pytest.raises(UnboundSymbolError):
        run("nowhere")


def test_closures_have_independent_state(run):
    run("(define (make-counter) (let ((n 0)) (lambda () (set! n (+ n 1)) n)))")
    run("(define c1 (make-counter))")
    run("(define c2 (make-counter))")
    run("(c1)")
    assert run("(c1)") == 2.0
    assert run("(c2)") == 1.0


def test_mutation_visible_through_shared_frame(run):
    run("(define n 1)")
    run("(define (get) n)")
    run("(set! n 5)")
    assert run("(get)") == 5.0


def test_mutation_of_global_does_not_change_captured_parameter(run):
    run("(define n 3)")
    run("(define make-adder (lambda (n) (lambda (x) (+ x n))))")
    run("(define add3 (make-adder n))")
    run("(set! n 100)")
    assert run("(add3 4)") == 7.0


def test_shadowing_parameter_does_not_mutate_outer(run):
    run("(define x 10)")
    run("(define (f x) (set! x 99) x)")
    assert run("(f 1)") == 99.0
    assert run("x") == 10.0


@pytest.mark.parametrize("source,error", [("(set! x)", ArityError), ("(set! 1 2)", CrispTypeError)])
def test_set_malformed(run, source, error):
    with pytest.raises(error):
        run(source)


# ------------------ cond ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(cond ((< 2 1) 'a) ((< 1 2) 'b) (else 'c))", Symbol("b")),
        ("(cond (false 'a) (else 'c))", Symbol("c")),
        ("(cond (false 'a))", Nil),
        ("(cond)", Nil),
        ("(cond (42))", 42.0),
        ("(cond (true 1 2 3))", 3.0),
    ]
)
def test_cond(run, source, expected):
    assert run(source) == expected


def test_cond_malformed_clause(run):
    with pytest.raises(CrispTypeError):
        run("(cond 5)")


# ------------------ code shape ------------------

def test_improper_list_in_code_position(run):
    with pytest.raises(CrispSyntaxError) as info:
        run("(+ 1 . 2)")
    assert info.value.kind == "MalformedForm"


def test_special_form_names_win_over_bindings(run):
    run("(define quote 5)")
    assert run("(quote x)") == Symbol("x")
