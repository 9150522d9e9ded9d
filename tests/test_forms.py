import pytest

from jsonmonkey.forms import FormRegistry, create_core_forms, define_form
from jsonmonkey.types import Ident, add_expr, bind_expr, lit_expr, number_val


CORE_ARITIES = {
    "$add": (2, 2),
    "$sub": (2, 2),
    "$bind": (2, 2),
    "$ref": (1, 1),
    "$if": (2, 3),
    "$and": (2, 2),
    "$or": (2, 2),
    "$not": (1, 1),
    "$eq": (2, 2),
    "$notEq": (2, 2),
}


def test_core_forms_cover_every_tag():
    forms = create_core_forms()
    assert sorted(forms.tags()) == sorted(CORE_ARITIES)
    assert "$while" not in forms


@pytest.mark.parametrize("tag", sorted(CORE_ARITIES))
def test_core_form_arity(tag):
    form = create_core_forms().lookup(tag)
    min_arity, max_arity = CORE_ARITIES[tag]
    assert (form.min_arity, form.max_arity) == (min_arity, max_arity)
    assert not form.check_arity(min_arity - 1)
    assert form.check_arity(min_arity)
    assert form.check_arity(max_arity)
    assert not form.check_arity(max_arity + 1)


def test_ident_positions():
    forms = create_core_forms()
    assert forms.lookup("$bind").expects_ident(0)
    assert not forms.lookup("$bind").expects_ident(1)
    assert forms.lookup("$ref").expects_ident(0)
    assert not forms.lookup("$add").expects_ident(0)


def test_form_builds_nodes():
    forms = create_core_forms()
    one = lit_expr(number_val(1))
    assert forms.lookup("$add").build(one, one) == add_expr(one, one)
    assert forms.lookup("$bind").build(Ident("x"), one) == bind_expr(Ident("x"), one)


def test_duplicate_registration_is_rejected():
    registry = FormRegistry()
    form = define_form("$add").arity(2).build_with(add_expr).build()
    registry.register(form)
    with pytest.raises(ValueError):
        registry.register(form)


def test_builder_requires_arity_and_rule():
    with pytest.raises(ValueError):
        define_form("$x").build_with(add_expr).build()
    with pytest.raises(ValueError):
        define_form("$x").arity(1).build()
    with pytest.raises(ValueError):
        define_form("$x").arity(3, 2).build_with(add_expr).build()


def test_form_str():
    forms = create_core_forms()
    assert str(forms.lookup("$if")) == "Form($if/2..3)"
    assert str(forms.lookup("$not")) == "Form($not/1)"
