import pytest

from kappa.errors import UnboundVar
from kappa.types.environment import Environment


@pytest.fixture
def parent():
    env = Environment()
    env.define("x", 1)
    return env


def test_lookup_and_define(parent):
    assert parent.lookup("x") == 1
    assert parent.define("y", 2) == 2
    assert parent.lookup("y") == 2
    assert "y" in parent


def test_lookup_unbound_raises():
    with pytest.raises(UnboundVar) as excinfo:
        Environment().lookup("y")
    assert str(excinfo.value) == "Getting an unbound variable: y"
    assert excinfo.value.name == "y"


def test_set_requires_existing_binding(parent):
    assert parent.set("x", 5) == 5
    assert parent.lookup("x") == 5
    with pytest.raises(UnboundVar) as excinfo:
        parent.set("nope", 1)
    assert str(excinfo.value) == "Setting an unbound variable: nope"


def test_redefining_owned_name_reuses_cell(parent):
    cell = parent.bindings["x"]
    parent.define("x", 10)
    assert parent.bindings["x"] is cell
    assert cell.value == 10


def test_extend_shares_cells_with_parent(parent):
    child = parent.extend()
    assert child.bindings["x"] is parent.bindings["x"]
    child.set("x", 2)
    assert parent.lookup("x") == 2
    parent.set("x", 3)
    assert child.lookup("x") == 3


def test_new_child_bindings_are_invisible_to_parent(parent):
    child = parent.extend([("a", 1)])
    child.define("b", 2)
    assert child.lookup("a") == 1
    assert child.lookup("b") == 2
    assert not parent.is_bound("a")
    assert not parent.is_bound("b")


def test_defining_inherited_name_shadows_it(parent):
    child = parent.extend()
    child.define("x", 99)
    assert child.lookup("x") == 99
    assert parent.lookup("x") == 1


def test_later_parent_bindings_are_invisible_to_child(parent):
    child = parent.extend()
    parent.define("late", 1)
    assert not child.is_bound("late")
    with pytest.raises(UnboundVar):
        child.lookup("late")


def test_extend_bindings_apply_in_order(parent):
    child = parent.extend([("a", 1), ("a", 2), ("x", "override")])
    assert child.lookup("a") == 2
    assert child.lookup("x") == "override"
    assert parent.lookup("x") == 1


def test_environment_equality_is_by_shared_cells(parent):
    assert parent.extend() == parent
    assert parent.extend([("q", 1)]) != parent
    other = Environment()
    other.define("x", 1)
    assert other != parent
