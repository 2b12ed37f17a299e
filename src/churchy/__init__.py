try:
    import polars as pl  # noqa: F401
except ImportError:
    raise ImportError(
        "churchy needs the `polars` library. \n Please install it, typically with `pip install polars`"
    )

from .errors import ReductionBudgetExceeded
from .names import (
    NameRegistry,
    NamingContext,
    UniqueNameGenerator,
    current_context,
    default_context,
    naming_context,
)
from .term import App, Fuel, Lam, Term, Var, alpha_equivalent

__all__ = [
    "Term",
    "Var",
    "Lam",
    "App",
    "Fuel",
    "alpha_equivalent",
    "ReductionBudgetExceeded",
    "NameRegistry",
    "UniqueNameGenerator",
    "NamingContext",
    "current_context",
    "default_context",
    "naming_context",
]
