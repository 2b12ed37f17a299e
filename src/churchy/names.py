"""
Naming state shared by every term operation.

Substitution into an abstraction always renames the parameter to a fresh
variable. The fresh names are meaningless (`u1`, `u2`, ...), so each one is
recorded next to the name it replaced, and rendering maps it back:

```
Lam(Var("x"), Var("x")).sub(...)  # => Lam(Var("u1"), Var("u1"))
                                  #    renders as λx.x
```

The registry and the generator are grouped in a `NamingContext`. A default
context lives for the whole process; `naming_context()` swaps in another one
for a block of code.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from .term import Var

__all__ = [
    "NameRegistry",
    "UniqueNameGenerator",
    "NamingContext",
    "current_context",
    "default_context",
    "naming_context",
]

logger = logging.getLogger(__name__)


class NameRegistry:
    """Maps generated names back to the names they replaced."""

    def __init__(self):
        self._directory: dict[str, str] = {}

    def record(self, unique: str, original: str):
        self._directory[unique] = original

    def lookup(self, name: str) -> str:
        return self._directory.get(name, name)

    def __contains__(self, name: str) -> bool:
        return name in self._directory

    def __len__(self) -> int:
        return len(self._directory)


class UniqueNameGenerator:
    def __init__(self, registry: NameRegistry, prefix: str = "u"):
        self.registry = registry
        self.prefix = prefix
        self._index = 0
        self._lock = threading.Lock()

    @property
    def count(self) -> int:
        return self._index

    def generate(self, original: Var) -> Var:
        """
        Mint a fresh variable standing for `original`.

        The counter bump and the registry entry happen under one lock, so two
        threads sharing a generator never receive the same name.
        """
        from .term import Var

        with self._lock:
            self._index += 1
            unique = Var(f"{self.prefix}{self._index}")
            self.registry.record(unique.name, original.name)
        logger.debug("renamed %s to %s", original.name, unique.name)
        return unique


class NamingContext:
    def __init__(self, prefix: str = "u"):
        self.registry = NameRegistry()
        self.generator = UniqueNameGenerator(self.registry, prefix=prefix)


_default = NamingContext()
_active: ContextVar[NamingContext] = ContextVar("churchy_naming", default=_default)


def current_context() -> NamingContext:
    return _active.get()


def default_context() -> NamingContext:
    """The process-wide context, active whenever no `naming_context()` block is."""
    return _default


@contextmanager
def naming_context(
    context: Optional[NamingContext] = None,
) -> Iterator[NamingContext]:
    """
    Run a block with its own naming state.

    Terms built inside the block should also be rendered inside it: their
    generated names are only known to this context's registry.
    """
    if context is None:
        context = NamingContext()
    token = _active.set(context)
    try:
        yield context
    finally:
        _active.reset(token)
