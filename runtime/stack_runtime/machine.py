"""
Stack Runtime Machine State

One Machine lives for a whole session and is threaded explicitly through
every call. It owns:

- stack:    operand stack, last in first out
- bindings: name -> value, later definitions overwrite earlier ones
- pending:  in-progress block accumulators, one per open '{'

The pending stack persists across lines, so a block may be opened on one line
and closed on a later one.
"""

from typing import Any, Callable, Dict, List, Optional

from .errors import MalformedBlock, StackUnderflow, TypeMismatch
from .values import Block, Number, Symbol, Value
from .builtins import install_builtins


class Machine:
    """Operand stack, bindings and block builder for one session"""

    def __init__(self, output: Optional[Callable[[str], Any]] = None):
        self.stack: List[Value] = []
        self.bindings: Dict[str, Value] = {}
        self.pending: List[List[Value]] = []
        self.output = output or print
        install_builtins(self.bindings)

    def reset(self):
        """Drop all state, keeping builtins"""
        self.stack.clear()
        self.bindings.clear()
        self.pending.clear()
        install_builtins(self.bindings)

    # ------------------------------------------------------------------------
    # Operand stack
    # ------------------------------------------------------------------------

    def push(self, value: Value):
        self.stack.append(value)

    def pop(self, op: str = 'pop') -> Value:
        """Pop the top value, failing on an empty stack"""
        if not self.stack:
            raise StackUnderflow(f"{op}: stack is empty")
        return self.stack.pop()

    def peek(self, op: str = 'peek') -> Value:
        if not self.stack:
            raise StackUnderflow(f"{op}: stack is empty")
        return self.stack[-1]

    def pop_number(self, op: str) -> int:
        value = self.pop(op)
        if not isinstance(value, Number):
            raise TypeMismatch(f"{op}: expected a number, got {type(value).__name__}")
        return value.value

    def pop_block(self, op: str) -> Block:
        value = self.pop(op)
        if not isinstance(value, Block):
            raise TypeMismatch(f"{op}: expected a block, got {type(value).__name__}")
        return value

    def pop_symbol(self, op: str) -> Symbol:
        value = self.pop(op)
        if not isinstance(value, Symbol):
            raise TypeMismatch(f"{op}: expected a symbol, got {type(value).__name__}")
        return value

    def snapshot(self) -> List[Value]:
        """Copy of the operand stack for diagnostics"""
        return list(self.stack)

    # ------------------------------------------------------------------------
    # Block builder
    # ------------------------------------------------------------------------

    @property
    def building(self) -> bool:
        """True while at least one block is open"""
        return bool(self.pending)

    @property
    def depth(self) -> int:
        return len(self.pending)

    def open_block(self):
        self.pending.append([])

    def close_block(self) -> Block:
        """Finish the innermost open block"""
        if not self.pending:
            raise MalformedBlock("'}' without matching '{'")
        return Block(self.pending.pop())

    def append_pending(self, value: Value):
        """Add a value, unevaluated, to the innermost open block"""
        self.pending[-1].append(value)


__all__ = ['Machine']
