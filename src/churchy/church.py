"""
Church encodings of booleans, pairs and natural numbers.

Every value here is an ordinary `Term`, built with the constructors and
evaluated with the same machinery as any user term:

```
plus(two)(three)      # alpha-equivalent to `five`
plus / two / three    # same thing
to_int(mult(two)(three))  # 6
```

The numerals `one` ... `ten` are evaluated at import time in the default naming
context, whichever context is active when the module is first imported, so
they render with their source names outside any `naming_context()` block.

Source: https://en.wikipedia.org/wiki/Church_encoding
"""

from .names import default_context, naming_context
from .term import App, Lam, Term, Var

__all__ = [
    "identity",
    "self_app",
    "true",
    "false",
    "first",
    "second",
    "make_pair",
    "if_else",
    "zero",
    "succ",
    "is_zero",
    "zz",
    "ns",
    "pred",
    "plus",
    "minus",
    "mult",
    "power",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
    "ten",
    "not_",
    "or_",
    "and_",
    "impl",
    "eq_nums",
    "eq_bools",
    "fixed_point",
    "church_numeral",
    "to_int",
    "to_bool",
]

x = Var("x")
y = Var("y")
z = Var("z")
f = Var("f")
g = Var("g")
m = Var("m")
n = Var("n")
o = Var("o")
p = Var("p")
c = Var("c")
b1 = Var("b1")
b2 = Var("b2")

identity = Lam(x, x)
self_app = Lam(x, App(x, x))

true = Lam(x, Lam(y, x))
false = Lam(x, Lam(y, y))

first = Lam(x, Lam(y, x))
second = Lam(x, Lam(y, y))
make_pair = Lam(x, Lam(y, Lam(o, App(App(o, x), y))))

if_else = Lam(c, Lam(b1, Lam(b2, App(App(c, b1), b2))))

zero = Lam(f, Lam(z, z))
succ = Lam(n, Lam(f, Lam(z, App(f, App(App(n, f), z)))))
# a non-zero numeral ignores its argument and answers false
is_zero = Lam(n, App(App(n, App(first, false)), true))

# pred walks the pairs (0, 0) -> (0, 1) -> (1, 2) -> ... n times from (0, 0)
# and keeps the first component, so pred(zero) is zero
zz = App(App(make_pair, zero), zero)
ns = Lam(p, App(App(make_pair, App(p, second)), App(succ, App(p, second))))
pred = Lam(n, App(App(App(n, ns), zz), first))

plus = Lam(m, Lam(n, App(App(n, succ), m)))
# bottoms out at zero
minus = Lam(m, Lam(n, App(App(n, pred), m)))
mult = Lam(n, Lam(m, App(App(n, App(plus, m)), zero)))
# meaningless for a zero exponent
power = Lam(n, Lam(m, App(m, n)))

with naming_context(default_context()):
    one = App(succ, zero).evaluate()
    two = App(succ, one).evaluate()
    three = App(succ, two).evaluate()
    four = App(succ, three).evaluate()
    five = App(succ, four).evaluate()
    six = App(succ, five).evaluate()
    seven = App(succ, six).evaluate()
    eight = App(succ, seven).evaluate()
    nine = App(succ, eight).evaluate()
    ten = App(succ, nine).evaluate()

not_ = Lam(x, App(App(x, false), true))
or_ = Lam(x, Lam(y, App(App(x, true), y)))
and_ = Lam(x, Lam(y, App(App(x, y), false)))
impl = Lam(x, Lam(y, App(App(or_, App(not_, x)), y)))

eq_nums = Lam(
    m,
    Lam(
        n,
        App(
            App(and_, App(is_zero, App(App(minus, m), n))),
            App(is_zero, App(App(minus, n), m)),
        ),
    ),
)
eq_bools = Lam(
    x, Lam(y, App(App(x, App(App(y, true), false)), App(App(y, false), true)))
)

# has no normal form: simplifying it, applied or not, never terminates
fixed_point = Lam(f, App(self_app, Lam(g, App(f, App(g, g)))))

# markers used to decode normal forms; not valid names for user variables
_SUCC = Var("#succ")
_ZERO = Var("#zero")
_TRUE = Var("#true")
_FALSE = Var("#false")


def church_numeral(number: int) -> Term:
    """Build `number` by applying `succ` to `zero` `number` times."""
    if isinstance(number, bool) or not isinstance(number, int) or number < 0:
        raise ValueError(f"only natural numbers can be encoded, got {number!r}")
    term = zero
    for _ in range(number):
        term = App(succ, term).evaluate()
    return term


def to_int(term: Term) -> int:
    """
    Decode a Church numeral.

    The numeral is applied to two free markers; its normal form must then be
    `#succ (#succ (... #zero))`.
    """
    body = App(App(term, _SUCC), _ZERO).simplify()
    count = 0
    while isinstance(body, App) and body.func == _SUCC:
        body = body.arg
        count += 1
    if body != _ZERO:
        raise ValueError(f"{term.render()} is not a Church numeral")
    return count


def to_bool(term: Term) -> bool:
    result = App(App(term, _TRUE), _FALSE).simplify()
    if result == _TRUE:
        return True
    if result == _FALSE:
        return False
    raise ValueError(f"{term.render()} is not a Church boolean")
