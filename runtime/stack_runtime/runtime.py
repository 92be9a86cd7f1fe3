"""
Stack Runtime - Runtime Interface

Wraps a Machine with the same execute/get_var/set_var surface as the other
language runtimes.

Syntax Examples:
    1 2 +                       -> [3]
    1 2 + { 3 4 * }             -> [3, { 3 4 * }]
    { 0 } { 1 } { -1 } if       -> [-1]
    /x 10 def x                 -> [10]
    /double { 2 * } def 10 double  -> [20]
"""

from typing import Any, Callable, Dict, List, Optional

from .errors import UndefinedName
from .evaluator import process_line
from .machine import Machine
from .values import Value, format_stack


class StackRuntime:
    """Main stack language runtime interface"""

    def __init__(self, output: Optional[Callable[[str], Any]] = None):
        self.machine = Machine(output=output)

    def execute(self, source: str) -> List[Value]:
        """Execute source (one or more lines) and return a copy of the stack"""
        for line in source.splitlines():
            process_line(line, self.machine)
        return self.machine.snapshot()

    @property
    def stack(self) -> List[Value]:
        return self.machine.snapshot()

    def render_stack(self) -> str:
        return format_stack(self.machine.stack)

    def set_var(self, name: str, value: Value):
        """Set binding in environment"""
        self.machine.bindings[name] = value

    def get_var(self, name: str) -> Value:
        """Get binding from environment"""
        if name not in self.machine.bindings:
            raise UndefinedName(f"Undefined operation: {name}")
        return self.machine.bindings[name]

    def get_env(self) -> Dict[str, Value]:
        """Get entire environment"""
        return self.machine.bindings.copy()

    def clear_env(self):
        """Clear stack and environment (keeping builtins)"""
        self.machine.reset()


def execute_stack(source: str) -> List[Value]:
    """
    Execute stack language source (convenience function)

    Args:
        source: program text, words separated by whitespace

    Returns:
        The operand stack after evaluation, bottom first

    Example:
        >>> execute_stack('1 2 +')
        [Number(value=3)]
    """
    runtime = StackRuntime()
    return runtime.execute(source)


__all__ = ['StackRuntime', 'execute_stack']
