import pytest

from kappa.builtin.env_builtin import PRIMITIVES, wrap_int64
from kappa.builtin.unpack import unpack_bool, unpack_num, unpack_str
from kappa.errors import NumArgs, TypeMismatch
from kappa.types.dotted_list import DottedList
from kappa.types.equality import eqv
from kappa.types.primitive import Primitive
from kappa.types.symbol import Symbol


def test_register_installs_primitives(env):
    for name in PRIMITIVES:
        assert isinstance(env.lookup(name), Primitive)
    assert env.lookup("car").name == "car"


# -------------------------------
# Unpackers
# -------------------------------

def test_unpack_num():
    assert unpack_num(5) == 5
    assert unpack_num("-12") == -12
    assert unpack_num([7]) == 7
    for bad in ("abc", "", True, [1, 2], [], Symbol("a"), DottedList([1], 2)):
        with pytest.raises(TypeMismatch):
            unpack_num(bad)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("9223372036854775807", 9223372036854775807),
        ("-9223372036854775808", -9223372036854775808),
    ],
)
def test_unpack_num_accepts_int64_bounds(text, expected):
    assert unpack_num(text) == expected


@pytest.mark.parametrize(
    "text", ["9223372036854775808", "-9223372036854775809", "99999999999999999999"]
)
def test_unpack_num_rejects_strings_outside_int64(run, text):
    with pytest.raises(TypeMismatch) as excinfo:
        unpack_num(text)
    assert excinfo.value.expected == "number"
    with pytest.raises(TypeMismatch):
        run(f'(< "{text}" 1)')


def test_unpack_str():
    assert unpack_str("s") == "s"
    assert unpack_str(12) == "12"
    assert unpack_str(True) == "true"
    assert unpack_str(False) == "false"
    for bad in ([], Symbol("a")):
        with pytest.raises(TypeMismatch):
            unpack_str(bad)


def test_unpack_bool():
    assert unpack_bool(False) is False
    for bad in (0, "false", []):
        with pytest.raises(TypeMismatch) as excinfo:
            unpack_bool(bad)
        assert excinfo.value.expected == "boolean"


def test_wrap_int64():
    assert wrap_int64(2**63) == -(2**63)
    assert wrap_int64(-(2**63) - 1) == 2**63 - 1
    assert wrap_int64(123) == 123


# -------------------------------
# Comparisons
# -------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(= 1 1)", True),
        ("(< 1 2)", True),
        ("(> 1 2)", False),
        ("(/= 1 2)", True),
        ("(>= 2 2)", True),
        ("(<= 3 2)", False),
        ('(= "1" 1)', True),
        ("(&& #t #f)", False),
        ("(|| #t #f)", True),
        ('(string=? "a" "a")', True),
        ('(string<? "abc" "abd")', True),
        ('(string>? "b" "a")', True),
        ('(string<=? "a" "a")', True),
        ('(string>=? "a" "b")', False),
        ('(string=? 1 "1")', True),
        ('(string=? #t "true")', True),
    ],
)
def test_comparisons(run, source, expected):
    assert run(source) is expected


@pytest.mark.parametrize("source", ["(< 1)", "(= 1 2 3)", "(&&)", '(string=? "a")'])
def test_comparisons_need_exactly_two_arguments(run, source):
    with pytest.raises(NumArgs) as excinfo:
        run(source)
    assert excinfo.value.expected == 2


@pytest.mark.parametrize(
    "source,expected_kind",
    [
        ("(&& 1 #t)", "boolean"),
        ("(< 'a 1)", "number"),
        ("(string=? '(a) \"a\")", "string"),
    ],
)
def test_comparison_type_mismatch(run, source, expected_kind):
    with pytest.raises(TypeMismatch) as excinfo:
        run(source)
    assert excinfo.value.expected == expected_kind


# -------------------------------
# Lists
# -------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(car '(1 2 3))", 1),
        ("(car '((1) 2))", [1]),
        ("(car '(1 . 2))", 1),
        ("(car '(1 2 . 3))", 1),
        ("(cdr '(1 2 3))", [2, 3]),
        ("(cdr '(1))", []),
        ("(cdr '(1 . 2))", 2),
        ("(cdr '(1 2 . 3))", DottedList([2], 3)),
        ("(cons 1 '())", [1]),
        ("(cons 1 '(2 3))", [1, 2, 3]),
        ("(cons 1 '(2 . 3))", DottedList([1, 2], 3)),
        ("(cons 1 2)", DottedList([1], 2)),
        ("(cons '(1) '(2))", [[1], 2]),
        ("(car (cons 'a 'b))", Symbol("a")),
        ("(cdr (cons 'a '()))", []),
    ],
)
def test_list_primitives(run, source, expected):
    assert eqv(run(source), expected)


@pytest.mark.parametrize("a", ["1", '"s"', "#f", "'x", "'()", "'(1 2)", "'(1 . 2)", "car"])
@pytest.mark.parametrize("b", ["2", "'()", "'(3)", "'(3 . 4)", '"t"'])
def test_car_of_cons(run, a, b):
    assert eqv(run(f"(car (cons {a} {b}))"), run(a))


def test_cdr_of_cons_onto_empty_list(run):
    assert run("(cdr (cons 1 '()))") == []
    assert run("(cons 1 '())") == [1]


@pytest.mark.parametrize("source", ["(car '())", "(car 1)", '(cdr "abc")', "(cdr '())"])
def test_car_cdr_need_a_pair(run, source):
    with pytest.raises(TypeMismatch) as excinfo:
        run(source)
    assert excinfo.value.expected == "pair"


@pytest.mark.parametrize(
    "source,expected,found",
    [
        ("(car)", 1, []),
        ("(car '(1) '(2))", 1, [[1], [2]]),
        ("(cdr)", 1, []),
        ("(cons 1)", 2, [1]),
        ("(cons 1 2 3)", 2, [1, 2, 3]),
    ],
)
def test_list_primitive_arity(run, source, expected, found):
    with pytest.raises(NumArgs) as excinfo:
        run(source)
    assert excinfo.value.expected == expected
    assert excinfo.value.found == found


# -------------------------------
# Equivalence
# -------------------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ('(eqv? 2 "2")', False),
        ('(equal? 2 "2")', True),
        ("(eqv? 'a 'a)", True),
        ("(eq? 'a 'b)", False),
        ("(eqv? '(1 2) '(1 2))", True),
        ("(eqv? '(1 . 2) '(1 . 2))", True),
        ("(eqv? '(1 2) '(1 . 2))", False),
        ("(eqv? #t 1)", False),
        ("(eqv? #f '())", False),
        ("(equal? #t 1)", False),
        ("(equal? '(1 \"2\") '(\"1\" 2))", True),
        ("(equal? '(1 2) '(1 2 3))", False),
        ("(equal? '(1 . 2) '(\"1\" . 2))", True),
        ("(equal? '(2) 2)", True),
        ("(equal? #t \"true\")", True),
        ("(equal? 'a 'a)", True),
        ("(equal? 'a \"a\")", False),
        ("(eqv? car car)", True),
        ("(eqv? car cdr)", False),
    ],
)
def test_equivalence(run, source, expected):
    assert run(source) is expected


@pytest.mark.parametrize("op", ["eq?", "eqv?", "equal?"])
def test_equivalence_arity(run, op):
    with pytest.raises(NumArgs) as excinfo:
        run(f"({op} 1)")
    assert excinfo.value.expected == 2


def test_primitives_compare_by_identity():
    fn = PRIMITIVES["car"]
    assert eqv(Primitive("car", fn), Primitive("car", fn)) is False
    p = Primitive("car", fn)
    assert eqv(p, p) is True
