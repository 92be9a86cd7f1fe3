"""
Stack Runtime - Interactive Stack Language Interpreter

Reads whitespace-delimited words, builds values and deferred code blocks, and
executes them against a machine made of an operand stack, name bindings and
an in-progress block accumulator.

**Core:**
- Values: Number, Operator, Symbol, Block, Native
- Reader: word classification
- Machine: stack, bindings, block builder
- Evaluator: literal push, operator dispatch, block invocation
- Built-ins: + - * / < dup exch if def puts

**Interfaces:**
- StackRuntime / execute_stack for embedding
- stackrun command line (interactive or batch)

Version: 1.0.0
"""

__version__ = '1.0.0'

# ============================================================================
# Errors
# ============================================================================

from .errors import (
    E_TYPE_MISMATCH, E_STACK_UNDERFLOW, E_UNDEFINED_NAME,
    E_MALFORMED_BLOCK, E_UNTERMINATED_BLOCK, E_DIVISION_BY_ZERO,
    E_INTEGER_OVERFLOW,
    StackError, TypeMismatch, StackUnderflow, UndefinedName,
    MalformedBlock, UnterminatedBlock, DivisionByZero, IntegerOverflow,
)

# ============================================================================
# Core
# ============================================================================

from .values import (
    INT32_MIN, INT32_MAX,
    Number, Operator, Symbol, Block, Native, Value,
    render_value, format_value, format_stack,
)
from .reader import classify, split_words, BLOCK_OPEN, BLOCK_CLOSE, SYMBOL_MARKER
from .evaluator import evaluate, run_block, process_word, process_line
from .builtins import BUILTINS, install_builtins
from .machine import Machine

# ============================================================================
# Runtime Interface
# ============================================================================

from .runtime import StackRuntime, execute_stack

# ============================================================================
# Exports
# ============================================================================

__all__ = [
    '__version__',

    # Errors
    'E_TYPE_MISMATCH', 'E_STACK_UNDERFLOW', 'E_UNDEFINED_NAME',
    'E_MALFORMED_BLOCK', 'E_UNTERMINATED_BLOCK', 'E_DIVISION_BY_ZERO',
    'E_INTEGER_OVERFLOW',
    'StackError', 'TypeMismatch', 'StackUnderflow', 'UndefinedName',
    'MalformedBlock', 'UnterminatedBlock', 'DivisionByZero', 'IntegerOverflow',

    # Values
    'INT32_MIN', 'INT32_MAX',
    'Number', 'Operator', 'Symbol', 'Block', 'Native', 'Value',
    'render_value', 'format_value', 'format_stack',

    # Reader
    'classify', 'split_words',
    'BLOCK_OPEN', 'BLOCK_CLOSE', 'SYMBOL_MARKER',

    # Evaluation
    'evaluate', 'run_block', 'process_word', 'process_line',
    'BUILTINS', 'install_builtins', 'Machine',

    # Runtime
    'StackRuntime', 'execute_stack',
]
