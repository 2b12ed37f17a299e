from churchy import church
from churchy.nodes import SCHEMA, free_variables, to_nodes
from churchy.term import App, Lam, Var

x, y, z = Var("x"), Var("y"), Var("z")


def test_to_nodes(fresh_names):
    nodes = to_nodes(Lam(x, App(x, y)))
    assert nodes.schema == SCHEMA
    assert nodes["id"].to_list() == [0, 1, 2, 3]
    assert nodes["kind"].to_list() == ["lambda", "application", "variable", "variable"]
    assert nodes["ref"].to_list() == [None, None, 0, None]
    assert nodes["arg"].to_list() == [None, 3, None, None]
    assert nodes["name"].to_list() == ["x", None, "x", "y"]


def test_labels_use_original_names(fresh_names):
    renamed = Lam(x, x).sub(y, z)
    nodes = to_nodes(renamed)
    assert nodes["name"].to_list() == ["u1", "u1"]
    assert nodes["label"].to_list() == ["x", "x"]


def test_shadowing_binds_innermost():
    nodes = to_nodes(Lam(x, Lam(x, x)))
    assert nodes["ref"].to_list() == [None, None, 1]


def test_single_variable():
    nodes = to_nodes(x)
    assert nodes.height == 1
    assert nodes["ref"].to_list() == [None]


def test_free_variables():
    term = App(Lam(x, App(x, y)), App(z, y))
    assert free_variables(term) == ["y", "z"]
    assert free_variables(church.plus) == []
