import pytest

from lumen.errors import LumenUndefinedVariable
from lumen.types.environment import Environment


@pytest.fixture
def chain():
    root = Environment()
    root.define("g", 1)
    middle = root.extend()
    middle.define("m", 2)
    leaf = middle.extend()
    return root, middle, leaf


def test_lookup_finds_owning_scope(chain):
    root, middle, leaf = chain
    assert leaf.lookup("g") is root
    assert leaf.lookup("m") is middle
    assert leaf.lookup("nope") is None
    assert root.lookup("m") is None


def test_get_walks_parents(chain):
    _, _, leaf = chain
    assert leaf.get("g") == 1
    assert leaf.get("m") == 2
    with pytest.raises(LumenUndefinedVariable):
        leaf.get("nope")


def test_define_shadows_without_touching_parent(chain):
    root, _, leaf = chain
    leaf.define("g", 99)
    assert leaf.get("g") == 99
    assert root.get("g") == 1


def test_set_writes_to_nearest_owner(chain):
    root, middle, leaf = chain
    assert leaf.set("m", 20) == 20
    assert middle.vars["m"] == 20
    assert "m" not in leaf.vars
    leaf.set("g", 10)
    assert root.vars["g"] == 10


def test_set_unbound_name_in_root_creates_global(chain):
    root, _, _ = chain
    root.set("fresh", 5)
    assert root.vars["fresh"] == 5


def test_set_unbound_name_in_child_fails(chain):
    root, _, leaf = chain
    with pytest.raises(LumenUndefinedVariable):
        leaf.set("fresh", 5)
    assert "fresh" not in root.vars


def test_root_and_update(chain):
    root, _, leaf = chain
    assert leaf.root() is root
    leaf.update({"a": 1, "b": 2})
    assert leaf.vars == {"a": 1, "b": 2}


def test_reprs(chain):
    root, middle, _ = chain
    assert str(root) == "{g: 1}"
    assert str(middle) == "{m: 2} -> ..."
    assert repr(middle) == "<Environment chain: {m: 2} -> {g: 1}>"
