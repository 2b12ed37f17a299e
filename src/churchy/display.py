"""Lambda diagrams of terms, drawn with svg.py.

- a lambda is a blue bar spanning the variables it binds
- a variable is a red box with a gray line going up to its lambda,
  or to the top of the picture when it is free
- an application is an orange outline around its function, with a black
  link to its argument
"""

from dataclasses import dataclass
from typing import Iterable

import polars as pl
import svg

from .nodes import to_nodes
from .term import Term

__all__ = ["Interval", "compute_layout", "compute_height", "draw", "to_svg"]


@dataclass(frozen=True)
class Interval:
    start: int
    end: int

    def __or__(self, other: "Interval") -> "Interval":
        return Interval(min(self.start, other.start), max(self.end, other.end))

    def shift(self, offset: int) -> "Interval":
        return Interval(self.start + offset, self.end + offset)


def compute_layout(
    nodes: pl.DataFrame,
) -> tuple[dict[int, Interval], dict[int, Interval]]:
    """
    Place every node of a node table.

    Rows are assigned top-down: a lambda body goes one row lower, an
    application function stays on the same row unless it is itself an
    application. Columns are assigned bottom-up: each variable takes one
    column, right to left, and every other node spans the columns of its
    subtree (a lambda also spans the variables it binds).
    """
    kinds = nodes["kind"]
    y = {0: Interval(0, 0)}
    for node, kind, arg in nodes.select("id", "kind", "arg").iter_rows():
        if kind == "variable":
            continue
        child = node + 1
        if kind == "application":
            y[child] = y[node].shift(1 if kinds[child] == "application" else 0)
            y[arg] = y[node]
        else:
            y[child] = y[node].shift(1)

    x: dict[int, Interval] = {}
    next_var_x = nodes.filter(pl.col("kind") == "variable").height - 1
    for node, kind, ref in (
        nodes.sort("id", descending=True).select("id", "kind", "ref").iter_rows()
    ):
        if kind == "variable":
            x[node] = Interval(next_var_x, next_var_x)
            next_var_x -= 1
            if ref is not None:
                x[ref] = x[node] | x[ref] if ref in x else x[node]
        else:
            child = node + 1
            x[node] = x[child] | x[node] if node in x else x[child]
            y[node] = y[child] | y[node]
    return x, y


def compute_height(nodes: pl.DataFrame) -> int:
    _, y = compute_layout(nodes)
    return max(interval.end for interval in y.values()) + 1


def draw(
    x: dict[int, Interval],
    y: dict[int, Interval],
    node: int,
    kind: str,
    ref,
    arg,
) -> Iterable[svg.Element]:
    x_node = x[node]
    y_node = y[node]
    if kind == "application":
        yield svg.Rect(
            x=0.1 + x_node.start,
            y=0.1 + y_node.start,
            width=0.8 + x_node.end - x_node.start,
            height=0.8,
            fill="none",
            stroke="orange",
            stroke_width=0.1,
        )
        x_arg = x[arg]
        y_arg = y[arg]
        yield svg.Line(
            x1=0.5 + x_node.end,
            y1=0.5 + y_node.start,
            x2=0.5 + x_arg.start,
            y2=0.5 + y_arg.start,
            stroke="black",
            stroke_width=0.05,
        )
        yield svg.Circle(cx=0.5 + x_node.end, cy=0.5 + y_node.start, r=0.1, fill="black")
        return

    yield svg.Rect(
        x=0.1 + x_node.start,
        y=0.1 + y_node.start,
        width=0.8 + x_node.end - x_node.start,
        height=0.8,
        fill="blue" if kind == "lambda" else "red",
        stroke="gray",
        stroke_width=0.05,
    )
    if kind == "variable":
        top = y[ref].start + 0.9 if ref is not None else 0
        yield svg.Line(
            x1=x_node.start + 0.5,
            y1=y_node.start + 0.1,
            x2=x_node.start + 0.5,
            y2=top,
            stroke="gray",
            stroke_width=0.1,
        )


def to_svg(term: Term) -> svg.SVG:
    nodes = to_nodes(term)
    x, y = compute_layout(nodes)
    width = max(interval.end for interval in x.values()) + 1
    height = max(interval.end for interval in y.values()) + 1

    elements = []
    for node, kind, ref, arg in (
        nodes.select("id", "kind", "ref", "arg").sort("id", descending=True).iter_rows()
    ):
        elements.extend(draw(x, y, node, kind, ref, arg))

    # prefered size in pixels
    H = height * 40
    return svg.SVG(
        xmlns="http://www.w3.org/2000/svg",
        viewBox=f"0 0 {width} {height}",  # type: ignore
        style=f"max-height:{H}px",
        elements=elements,
    )
