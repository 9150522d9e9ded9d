import pytest

from jsonmonkey.errors import ParseError, ParseErrorCodes
from jsonmonkey.forms import FormRegistry, define_form
from jsonmonkey.parser import JIRParser, ParseOptions, parse
from jsonmonkey.types import (
    Ident,
    add_expr,
    and_expr,
    bind_expr,
    bool_val,
    eq_expr,
    ident_expr,
    if_expr,
    lit_expr,
    not_eq_expr,
    not_expr,
    null_val,
    number_val,
    or_expr,
    string_val,
    sub_expr,
)


def num(n):
    return lit_expr(number_val(n))


def parse_error(text, **kwargs):
    with pytest.raises(ParseError) as exc:
        parse(text, **kwargs)
    return exc.value


#------------------------------------------------------------------------------
# Scalars
#------------------------------------------------------------------------------

@pytest.mark.parametrize("text, expected", [
    ("1", num(1)),
    ("-2.5", num(-2.5)),
    ("null", lit_expr(null_val())),
    ("true", lit_expr(bool_val(True))),
    ("false", lit_expr(bool_val(False))),
    ('"$add"', lit_expr(string_val("$add"))),
    ('"hello"', lit_expr(string_val("hello"))),
])
def test_scalars(text, expected):
    assert parse(text) == expected


def test_booleans_are_not_numbers():
    assert parse("true").value.kind == "bool"


#------------------------------------------------------------------------------
# Compound forms
#------------------------------------------------------------------------------

def test_parses_addition():
    assert parse('["$add", 1, 2]') == add_expr(num(1), num(2))


def test_parses_subtraction():
    assert parse('["$sub", 1, 2]') == sub_expr(num(1), num(2))


def test_parses_bind_and_ref():
    assert parse('["$bind", "x", 1]') == bind_expr(Ident("x"), num(1))
    assert parse('["$ref", "x"]') == ident_expr(Ident("x"))


def test_parses_logic_and_comparison():
    t = lit_expr(bool_val(True))
    assert parse('["$and", true, 1]') == and_expr(t, num(1))
    assert parse('["$or", true, 1]') == or_expr(t, num(1))
    assert parse('["$not", true]') == not_expr(t)
    assert parse('["$eq", 1, 1]') == eq_expr(num(1), num(1))
    assert parse('["$notEq", 1, 1]') == not_eq_expr(num(1), num(1))


def test_parses_if_with_and_without_else():
    t = lit_expr(bool_val(True))
    assert parse('["$if", true, 1]') == if_expr(t, num(1))
    assert parse('["$if", true, 1, 2]') == if_expr(t, num(1), num(2))


def test_parses_nested_forms():
    text = '["$add", ["$ref", "x"], ["$sub", 3, 1]]'
    assert parse(text) == add_expr(ident_expr(Ident("x")), sub_expr(num(3), num(1)))


def test_string_operands_stay_literals():
    assert parse('["$add", "$sub", "b"]') == add_expr(
        lit_expr(string_val("$sub")), lit_expr(string_val("b"))
    )


#------------------------------------------------------------------------------
# Errors
#------------------------------------------------------------------------------

@pytest.mark.parametrize("text", ["[", "", "1 2", "{'a': 1}", "NaN", "Infinity", "-Infinity"])
def test_invalid_json(text):
    assert parse_error(text).code == ParseErrorCodes.INVALID_JSON


def test_invalid_json_chains_decoder_error():
    error = parse_error("[")
    assert isinstance(error.__cause__, ValueError)


@pytest.mark.parametrize("text", [
    '{"a": 1}',
    "[]",
    "[1, 2]",
    '[["$add", 1, 2]]',
    '["$mul", 1, 2]',
    '["$while", true, 1]',
    '["$add", {"a": 1}, 2]',
])
def test_unsupported_form(text):
    assert parse_error(text).code == ParseErrorCodes.UNSUPPORTED_FORM


def test_not_enough_args():
    error = parse_error('["$add", 1]')
    assert error.code == ParseErrorCodes.NOT_ENOUGH_ARGS
    assert error.meta["actual"] == 1
    assert error.meta["expected_min"] == 2


def test_too_many_args():
    error = parse_error('["$not", 1, 2]')
    assert error.code == ParseErrorCodes.TOO_MANY_ARGS
    assert error.meta["actual"] == 2
    assert error.meta["expected_max"] == 1


@pytest.mark.parametrize("text, code, actual", [
    ('["$if", true]', ParseErrorCodes.NOT_ENOUGH_ARGS, 1),
    ('["$if", true, 1, 2, 3]', ParseErrorCodes.TOO_MANY_ARGS, 4),
    ('["$ref"]', ParseErrorCodes.NOT_ENOUGH_ARGS, 0),
    ('["$bind", "x", 1, 2]', ParseErrorCodes.TOO_MANY_ARGS, 3),
])
def test_arity_bounds(text, code, actual):
    error = parse_error(text)
    assert error.code == code
    assert error.meta["actual"] == actual


def test_arity_is_checked_before_operands():
    error = parse_error('["$add", ["$nope"], 1, 2]')
    assert error.code == ParseErrorCodes.TOO_MANY_ARGS


@pytest.mark.parametrize("text", [
    '["$bind", 1, 2]',
    '["$bind", ["$ref", "x"], 2]',
    '["$ref", null]',
    '["$ref", true]',
])
def test_ident_expected(text):
    assert parse_error(text).code == ParseErrorCodes.IDENT_EXPECTED


def test_error_path_locates_fragment():
    error = parse_error('["$add", 1, ["$ref", 2]]')
    assert error.code == ParseErrorCodes.IDENT_EXPECTED
    assert error.path == "$[2][1]"
    assert error.to_dict()["path"] == "$[2][1]"


@pytest.mark.parametrize("text", ["1e400", "-1e400", '["$add", 1, 1e999]', "1" * 400])
def test_unsupported_number_literal(text):
    assert parse_error(text).code == ParseErrorCodes.UNSUPPORTED_NUMBER_LITERAL


def test_large_finite_numbers_are_accepted():
    assert parse("1e308") == num(1e308)


#------------------------------------------------------------------------------
# Nesting limits
#------------------------------------------------------------------------------

def nested_not(depth):
    return '["$not", ' * depth + "true" + "]" * depth


def test_nesting_within_limit():
    options = ParseOptions(max_depth=3)
    assert parse(nested_not(3), options=options).kind == "not"


def test_nesting_beyond_limit():
    error = parse_error(nested_not(4), options=ParseOptions(max_depth=3))
    assert error.code == ParseErrorCodes.NESTING_TOO_DEEP
    assert error.meta["max_depth"] == 3


def test_default_nesting_limit():
    error = parse_error(nested_not(300))
    assert error.code == ParseErrorCodes.NESTING_TOO_DEEP


def test_parse_value_accepts_decoded_json():
    parser = JIRParser()
    assert parser.parse_value(["$add", 1, 2]) == add_expr(num(1), num(2))
    with pytest.raises(ParseError) as exc:
        parser.parse_value(["$add", 10 ** 400, 1])
    assert exc.value.code == ParseErrorCodes.UNSUPPORTED_NUMBER_LITERAL


def test_nesting_at_default_limit():
    depth = ParseOptions().max_depth
    assert parse(nested_not(depth)).kind == "not"


def test_nesting_limit_above_stack_is_reported():
    options = ParseOptions(max_depth=5000)
    error = parse_error(nested_not(3000), options=options)
    assert error.code == ParseErrorCodes.NESTING_TOO_DEEP
    assert error.meta["max_depth"] == 5000


def test_custom_form_arity_range():
    forms = FormRegistry().register(
        define_form("$pick").arity(1, 2).build_with(lambda *args: args[-1]).build()
    )
    parser = JIRParser(forms=forms)
    assert parser.parse('["$pick", 1]') == num(1)
    assert parser.parse('["$pick", 1, 2]') == num(2)
    with pytest.raises(ParseError) as exc:
        parser.parse('["$pick"]')
    assert exc.value.meta == {"tag": "$pick", "actual": 0, "expected_min": 1}
    with pytest.raises(ParseError) as exc:
        parser.parse('["$pick", 1, 2, 3]')
    assert exc.value.meta == {"tag": "$pick", "actual": 3, "expected_max": 2}
    with pytest.raises(ParseError) as exc:
        parser.parse('["$add", 1, 2]')
    assert exc.value.code == ParseErrorCodes.UNSUPPORTED_FORM
