"""
Stack Runtime Value Model

Every runtime entity is one of a closed set of variants:

- Number:   signed 32-bit integer
- Operator: name looked up and acted on when encountered outside a block
- Symbol:   name produced by the '/' marker, used as a binding target
- Block:    deferred, unevaluated sequence of values (may nest)
- Native:   built-in procedure, equal only to itself (function identity)

Blocks are never evaluated implicitly; only `if` and bound-block invocation
iterate their items.
"""

from typing import Callable, Iterable, Tuple, Union
from dataclasses import dataclass, field

import numpy as np

from .errors import IntegerOverflow


# ============================================================================
# Integer Width
# ============================================================================

_I32 = np.iinfo(np.int32)
INT32_MIN = int(_I32.min)
INT32_MAX = int(_I32.max)


def fits_int32(n: int) -> bool:
    """Check that n is representable as a signed 32-bit integer"""
    return INT32_MIN <= n <= INT32_MAX


# ============================================================================
# Variants
# ============================================================================

@dataclass(frozen=True)
class Number:
    """Signed 32-bit integer"""
    value: int

    @classmethod
    def checked(cls, n: int) -> "Number":
        """Build a Number, failing instead of wrapping on overflow"""
        if not fits_int32(n):
            raise IntegerOverflow(f"Result {n} does not fit in 32 bits")
        return cls(n)


@dataclass(frozen=True)
class Operator:
    name: str


@dataclass(frozen=True)
class Symbol:
    name: str


@dataclass(frozen=True, init=False)
class Block:
    """Unevaluated code"""
    items: Tuple["Value", ...] = ()

    def __init__(self, items: Iterable["Value"] = ()):
        object.__setattr__(self, 'items', tuple(items))

    def __iter__(self):
        return iter(self.items)

    def __len__(self):
        return len(self.items)


@dataclass(frozen=True)
class Native:
    """Built-in procedure; identity is the underlying function"""
    func: Callable
    name: str = field(default='', compare=False)

    def __call__(self, machine):
        return self.func(machine)


Value = Union[Number, Operator, Symbol, Block, Native]


# ============================================================================
# Rendering
# ============================================================================

def render_value(value: Value) -> str:
    """
    Render a value for `puts`.

    Blocks and natives render as opaque placeholders, never their contents.
    """
    if isinstance(value, Number):
        return str(value.value)
    if isinstance(value, (Operator, Symbol)):
        return value.name
    if isinstance(value, Block):
        return '<block>'
    return '<native>'


def format_value(value: Value) -> str:
    """Render a value for diagnostics (stack dumps, traces)"""
    if isinstance(value, Number):
        return str(value.value)
    if isinstance(value, Operator):
        return value.name
    if isinstance(value, Symbol):
        return f"/{value.name}"
    if isinstance(value, Block):
        if not value.items:
            return '{ }'
        return '{ ' + ' '.join(format_value(v) for v in value.items) + ' }'
    return f"<native {value.name}>" if value.name else '<native>'


def format_stack(values: Iterable[Value]) -> str:
    """Render the operand stack, bottom first"""
    return 'stack: [' + ', '.join(format_value(v) for v in values) + ']'


__all__ = [
    'INT32_MIN', 'INT32_MAX', 'fits_int32',
    'Number', 'Operator', 'Symbol', 'Block', 'Native', 'Value',
    'render_value', 'format_value', 'format_stack',
]
