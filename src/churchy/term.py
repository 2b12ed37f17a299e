"""
Lambda calculus terms with named variables.

A term is one of three immutable variants:

- `Var("x")`: a variable, identified by its name
- `Lam(Var("x"), body)`: an abstraction binding `x` in `body`
- `App(func, arg)`: the application of `func` to `arg`

Example:
    λx.x        =>  Lam(Var("x"), Var("x"))
    λf.λz.(f z) =>  Lam(Var("f"), Lam(Var("z"), App(Var("f"), Var("z"))))

# Reduction strategy

`simplify` normalizes a term:

1. a variable is already normal
2. an abstraction normalizes its body
3. an application normalizes both sides, then fires the redex if the function
   side turned out to be an abstraction. Firing substitutes the (normal)
   argument for the parameter and normalizes the result again.

Terms are never reduced at construction; only `simplify` / `evaluate` (and the
application sugar `f(a)` and `f / a`) reduce.

# Substitution

Substituting into an abstraction always renames its parameter to a fresh
variable first, so free variables of the replacement can never be captured.
The fresh names come from the active `NamingContext` (see `names`).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from .errors import ReductionBudgetExceeded
from .names import current_context

__all__ = ["Term", "Var", "Lam", "App", "Fuel", "alpha_equivalent"]

logger = logging.getLogger(__name__)


class Fuel:
    """
    A budget of beta steps, shared by a whole reduction.

    ```
    Var("x").simplify()                  # unbounded
    omega.simplify(fuel=Fuel(1000))      # raises ReductionBudgetExceeded
    ```
    """

    def __init__(self, steps: int):
        if steps < 0:
            raise ValueError(f"fuel must be non-negative, got {steps}")
        self.limit = steps
        self.remaining = steps

    def consume(self):
        if self.remaining == 0:
            logger.warning("reduction stopped after %d beta steps", self.limit)
            raise ReductionBudgetExceeded(self.limit)
        self.remaining -= 1

    @property
    def used(self) -> int:
        return self.limit - self.remaining


class Term(ABC):
    """Base class for lambda calculus terms."""

    def __call__(self, arg: Term) -> Term:
        """Apply this term to an argument and evaluate: `plus(one)(two)`"""
        return App(self, arg).evaluate()

    def __truediv__(self, arg: Term) -> Term:
        """Same as `__call__`, chained left to right: `plus / one / two`"""
        return App(self, arg).evaluate()

    @abstractmethod
    def sub(self, target: Var, replacement: Term) -> Term:
        """Replace the free occurrences of `target` by `replacement`."""
        ...

    @abstractmethod
    def beta(self, arg: Term, fuel: Optional[Fuel] = None) -> Term: ...

    @abstractmethod
    def simplify(self, fuel: Optional[Fuel] = None) -> Term: ...

    @abstractmethod
    def evaluate(self, fuel: Optional[Fuel] = None) -> Term: ...

    @abstractmethod
    def render(self) -> str: ...

    def __str__(self) -> str:
        return self.render()

    def _repr_html_(self) -> str:
        from .display import to_svg

        return f"<div>{to_svg(self).as_str()}</div>"


@dataclass(frozen=True)
class Var(Term):
    """
    A variable.

    Two variables are equal iff their names are equal. Names produced by
    renaming render as the name they replaced.
    """

    name: str

    def __post_init__(self):
        if not isinstance(self.name, str):
            raise TypeError(f"variable name must be a string, got {self.name!r}")
        if not self.name:
            raise ValueError("variable name cannot be empty")

    def sub(self, target: Var, replacement: Term) -> Term:
        if self == target:
            return replacement
        return self

    def beta(self, arg: Term, fuel: Optional[Fuel] = None) -> Term:
        return self

    def simplify(self, fuel: Optional[Fuel] = None) -> Term:
        return self

    def evaluate(self, fuel: Optional[Fuel] = None) -> Term:
        return self

    def render(self) -> str:
        return current_context().registry.lookup(self.name)


@dataclass(frozen=True)
class Lam(Term):
    """
    Lambda abstraction.

    An abstraction is a value: `evaluate` leaves it untouched, and it only
    reduces when applied.
    """

    param: Var
    body: Term

    def __post_init__(self):
        if not isinstance(self.param, Var):
            raise TypeError(f"parameter must be a Var, got {self.param!r}")
        if not isinstance(self.body, Term):
            raise TypeError(f"body must be a Term, got {self.body!r}")

    def sub(self, target: Var, replacement: Term) -> Lam:
        unique = current_context().generator.generate(self.param)
        return Lam(unique, self.body.sub(self.param, unique).sub(target, replacement))

    def beta(self, arg: Term, fuel: Optional[Fuel] = None) -> Term:
        if fuel is not None:
            fuel.consume()
        return self.body.sub(self.param, arg.simplify(fuel)).simplify(fuel)

    def simplify(self, fuel: Optional[Fuel] = None) -> Term:
        return Lam(self.param, self.body.simplify(fuel))

    def evaluate(self, fuel: Optional[Fuel] = None) -> Term:
        return self

    def render(self) -> str:
        return f"λ{self.param.render()}.{self.body.render()}"


@dataclass(frozen=True)
class App(Term):
    """Function application."""

    func: Term
    arg: Term

    def __post_init__(self):
        if not isinstance(self.func, Term):
            raise TypeError(f"function must be a Term, got {self.func!r}")
        if not isinstance(self.arg, Term):
            raise TypeError(f"argument must be a Term, got {self.arg!r}")

    def sub(self, target: Var, replacement: Term) -> App:
        return App(
            self.func.sub(target, replacement), self.arg.sub(target, replacement)
        )

    def beta(self, arg: Term, fuel: Optional[Fuel] = None) -> Term:
        return App(self, arg).evaluate(fuel)

    def simplify(self, fuel: Optional[Fuel] = None) -> Term:
        func = self.func.simplify(fuel)
        arg = self.arg.simplify(fuel)
        match func:
            case Lam():
                return func.beta(arg, fuel)
            case Var() | App():
                # stuck: nothing to fire without an abstraction in head position
                return App(func, arg)
        raise TypeError(f"unknown term {func!r}")

    def evaluate(self, fuel: Optional[Fuel] = None) -> Term:
        return self.simplify(fuel)

    def render(self) -> str:
        return f"({self.func.render()} {self.arg.render()})"


def alpha_equivalent(a: Term, b: Term) -> bool:
    """
    Check if two terms are equal up to the names of their bound variables.

    Free variables must have the same name on both sides.

    ```
    alpha_equivalent(Lam(Var("x"), Var("x")), Lam(Var("u3"), Var("u3")))  # True
    alpha_equivalent(Lam(Var("x"), Var("y")), Lam(Var("y"), Var("y")))    # False
    ```
    """
    return _alpha_equivalent(a, b, {}, {}, 0)


def _alpha_equivalent(
    a: Term, b: Term, left: dict[str, int], right: dict[str, int], depth: int
) -> bool:
    match a, b:
        case Var(x), Var(y):
            if x in left or y in right:
                return left.get(x) == right.get(y)
            return x == y
        case Lam(p, body_a), Lam(q, body_b):
            return _alpha_equivalent(
                body_a,
                body_b,
                {**left, p.name: depth},
                {**right, q.name: depth},
                depth + 1,
            )
        case App(f, x), App(g, y):
            return _alpha_equivalent(f, g, left, right, depth) and _alpha_equivalent(
                x, y, left, right, depth
            )
    return False
