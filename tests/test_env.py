from jsonmonkey.env import Environment, empty_env
from jsonmonkey.types import Ident, number_val, string_val


def test_empty_env_has_no_bindings():
    env = empty_env()
    assert len(env) == 0
    assert env.lookup(Ident("x")) is None
    assert Ident("x") not in env


def test_bind_inserts_then_overwrites():
    env = Environment()
    env.bind(Ident("x"), number_val(1))
    assert env.lookup(Ident("x")) == number_val(1)

    env.bind(Ident("x"), string_val("two"))
    assert env.lookup(Ident("x")) == string_val("two")
    assert len(env) == 1


def test_bindings_returns_a_copy():
    env = Environment({Ident("x"): number_val(1)})
    snapshot = env.bindings
    snapshot[Ident("y")] = number_val(2)
    assert Ident("y") not in env
    assert list(env) == [Ident("x")]
