"""
Stack Runtime Built-ins

Native procedures installed into a machine's bindings at startup. Each takes
the machine and reads/writes its stack directly. Operands are pushed deepest
first, so `rhs` is the top of stack on entry:

    +  -  *  /     lhs rhs -> result      (32-bit, no wrapping)
    <              lhs rhs -> 1 | 0
    dup            a       -> a a
    exch           a b     -> b a
    if             cond true false -> (runs cond, then one branch)
    def            /name value     -> (binds name)
    puts           a       -> (writes a)
"""

from typing import Callable, Dict

from .errors import DivisionByZero
from .evaluator import evaluate, run_block
from .values import Native, Number, render_value


# ============================================================================
# Arithmetic and Comparison
# ============================================================================

def _truncating_div(lhs: int, rhs: int) -> int:
    if rhs == 0:
        raise DivisionByZero(f"{lhs} / 0")
    q = abs(lhs) // abs(rhs)
    return q if (lhs < 0) == (rhs < 0) else -q


def _binary(op: str, fn: Callable[[int, int], int]):
    def native(machine):
        rhs = machine.pop_number(op)
        lhs = machine.pop_number(op)
        machine.push(Number.checked(fn(lhs, rhs)))
    native.__name__ = f"op_{op}"
    return native


op_add = _binary('+', lambda a, b: a + b)
op_sub = _binary('-', lambda a, b: a - b)
op_mul = _binary('*', lambda a, b: a * b)
op_div = _binary('/', _truncating_div)
op_lt = _binary('<', lambda a, b: 1 if a < b else 0)


# ============================================================================
# Stack Words
# ============================================================================

def op_dup(machine):
    machine.push(machine.peek('dup'))


def op_exch(machine):
    top = machine.pop('exch')
    below = machine.pop('exch')
    machine.push(top)
    machine.push(below)


# ============================================================================
# Control and Binding
# ============================================================================

def op_if(machine):
    """cond true false if -> run true when cond leaves a nonzero number"""
    false_branch = machine.pop_block('if')
    true_branch = machine.pop_block('if')
    cond = machine.pop_block('if')

    run_block(cond, machine)
    if machine.pop_number('if') != 0:
        run_block(true_branch, machine)
    else:
        run_block(false_branch, machine)


def op_def(machine):
    """
    /name value def

    The value is evaluated before binding, so a name that refers to another
    binding is bound to what it resolves to rather than to the raw operator.
    """
    value = machine.pop('def')
    evaluate(value, machine)
    result = machine.pop('def')
    name = machine.pop_symbol('def').name
    machine.bindings[name] = result


def op_puts(machine):
    machine.output(render_value(machine.pop('puts')))


# ============================================================================
# Table
# ============================================================================

BUILTINS: Dict[str, Callable] = {
    '+': op_add,
    '-': op_sub,
    '*': op_mul,
    '/': op_div,
    '<': op_lt,
    'dup': op_dup,
    'exch': op_exch,
    'if': op_if,
    'def': op_def,
    'puts': op_puts,
}


def install_builtins(bindings: Dict):
    """Bind every built-in name to its native procedure"""
    for name, func in BUILTINS.items():
        bindings[name] = Native(func, name)


__all__ = ['BUILTINS', 'install_builtins']
