import pytest

from sigma.errors import SigmaUnboundSymbol
from sigma.types.scope import Scope


@pytest.fixture
def root():
    s = Scope()
    s.define("x", 1.0)
    s.define("y", 2.0)
    return s


def test_root_has_no_parent(root):
    assert root.outer is None
    assert root.depth() == 0


def test_child_sees_parent_bindings(root):
    child = root.child()
    assert child.outer is root
    assert child.depth() == 1
    assert child.lookup("x") == 1.0


def test_inner_binding_shadows_outer(root):
    child = root.child()
    child.define("x", 10.0)
    assert child.lookup("x") == 10.0
    assert child.lookup("y") == 2.0
    # the outer binding is untouched
    assert root.lookup("x") == 1.0


def test_define_never_writes_to_parent(root):
    child = root.child()
    child.define("z", 3.0)
    assert root.lookup("z") is None


def test_find_returns_nearest_binding_scope(root):
    middle = root.child()
    middle.define("x", 5.0)
    inner = middle.child()
    assert inner.find("x") is middle
    assert inner.find("y") is root
    assert inner.find("nope") is None


def test_lookup_miss_returns_none(root):
    assert root.child().lookup("missing") is None


def test_resolve_unbound_raises(root):
    with pytest.raises(SigmaUnboundSymbol, match="unbound reference: missing"):
        root.child().resolve("missing")


def test_str_and_repr(root):
    child = root.child()
    child.define("x", 3.0)
    assert str(child) == "{x: 3.0} -> ..."
    assert repr(child) == "<Scope chain: {x: 3.0} -> {x: 1.0, y: 2.0}>"
