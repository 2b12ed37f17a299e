from churchy import church
from churchy.display import Interval, compute_height, compute_layout, to_svg
from churchy.nodes import to_nodes
from churchy.term import App, Lam, Var

x, f = Var("x"), Var("f")


def test_interval():
    assert Interval(0, 1) | Interval(3, 4) == Interval(0, 4)
    assert Interval(1, 2).shift(2) == Interval(3, 4)


def test_layout_identity():
    nodes = to_nodes(Lam(x, x))
    x_pos, y_pos = compute_layout(nodes)
    assert x_pos == {0: Interval(0, 0), 1: Interval(0, 0)}
    assert y_pos[1] == Interval(1, 1)
    assert y_pos[0] == Interval(0, 1)
    assert compute_height(nodes) == 2


def test_layout_application():
    # (f x): function and argument stay on the application's row
    nodes = to_nodes(App(f, x))
    x_pos, y_pos = compute_layout(nodes)
    assert x_pos[1] == Interval(0, 0)
    assert x_pos[2] == Interval(1, 1)
    assert x_pos[0] == Interval(0, 0)
    assert y_pos[1] == y_pos[2] == Interval(0, 0)


def test_lambda_spans_its_variables():
    nodes = to_nodes(church.true)
    x_pos, _ = compute_layout(nodes)
    assert x_pos[0] == Interval(0, 0)


def test_to_svg():
    rendered = to_svg(church.two).as_str()
    assert rendered.startswith("<svg")
    assert "blue" in rendered
    assert "red" in rendered
    assert "orange" in rendered


def test_free_variable_svg():
    rendered = to_svg(x).as_str()
    assert "red" in rendered
    assert "blue" not in rendered


def test_repr_html():
    html = church.identity._repr_html_()
    assert html.startswith("<div><svg")
    assert html.endswith("</svg></div>")
