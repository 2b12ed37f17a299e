"""Flat node table of a term.

A term is laid out in pre-order, one row per node:

- a `lambda` row: its body is the next row (`id + 1`)
- an `application` row: its function is the next row, `arg` points to its argument
- a `variable` row: `ref` points to the lambda binding it, null if it is free

```
λx.(x y)   =>   id  kind         ref   arg   name  label
                0   lambda       null  null  x     x
                1   application  null  3     null  null
                2   variable     0     null  x     x
                3   variable     null  null  y     y
```

`name` is the raw name, `label` what `render` would print for it.
"""

from __future__ import annotations

import polars as pl
from polars import Schema, String, UInt32

from .term import App, Lam, Term, Var

__all__ = ["SCHEMA", "to_nodes", "free_variables"]

SCHEMA = Schema(
    {
        "id": UInt32,
        "kind": String,
        "ref": UInt32,
        "arg": UInt32,
        "name": String,
        "label": String,
    },
)


def _flatten(term: Term, rows: list[dict], scope: dict[str, int]):
    node_id = len(rows)
    match term:
        case Var(name):
            rows.append(
                {
                    "id": node_id,
                    "kind": "variable",
                    "ref": scope.get(name),
                    "arg": None,
                    "name": name,
                    "label": term.render(),
                }
            )
        case Lam(param, body):
            rows.append(
                {
                    "id": node_id,
                    "kind": "lambda",
                    "ref": None,
                    "arg": None,
                    "name": param.name,
                    "label": param.render(),
                }
            )
            _flatten(body, rows, {**scope, param.name: node_id})
        case App(func, arg):
            row = {
                "id": node_id,
                "kind": "application",
                "ref": None,
                "arg": None,
                "name": None,
                "label": None,
            }
            rows.append(row)
            _flatten(func, rows, scope)
            row["arg"] = len(rows)
            _flatten(arg, rows, scope)
        case _:
            raise TypeError(f"unknown term {term!r}")


def to_nodes(term: Term) -> pl.DataFrame:
    rows: list[dict] = []
    _flatten(term, rows, {})
    return pl.from_dicts(rows, schema=SCHEMA)


def free_variables(term: Term) -> list[str]:
    """Names of the free variables of `term`, left to right, without repeats."""
    return (
        to_nodes(term)
        .filter(pl.col("kind") == "variable", pl.col("ref").is_null())
        .select("name")
        .unique(maintain_order=True)["name"]
        .to_list()
    )
