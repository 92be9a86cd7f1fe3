"""
Stack Runtime Evaluator

Feeds classified words into the machine one at a time:

- '{' opens a block, '}' closes the innermost one; a completed block goes to
  the enclosing open block, or is evaluated as a literal at depth zero
- while any block is open, every other value is appended unevaluated
- otherwise non-operators push themselves and operators resolve through the
  bindings (block -> run it, native -> call it, anything else -> push it)

Evaluation is plain recursion: a bound block that invokes other bound blocks
nests Python calls, so very deep recursion ends in RecursionError.
"""

import logging

from .errors import UndefinedName
from .reader import CLOSE, OPEN, classify, split_words
from .values import Block, Native, Operator, format_stack

logger = logging.getLogger('stack_runtime')


def evaluate(value, machine):
    """Evaluate one value against the machine"""
    if machine.building:
        machine.append_pending(value)
        return

    if not isinstance(value, Operator):
        machine.push(value)
        return

    try:
        bound = machine.bindings[value.name]
    except KeyError:
        raise UndefinedName(f"Undefined operation: {value.name}") from None

    if isinstance(bound, Block):
        run_block(bound, machine)
    elif isinstance(bound, Native):
        bound(machine)
    else:
        machine.push(bound)


def run_block(block: Block, machine):
    """Evaluate every item of a block in order"""
    for item in block:
        evaluate(item, machine)


def process_word(word: str, machine):
    """Classify one word and hand it to the block builder or evaluator"""
    token = classify(word)
    if token is None:
        return

    if token is OPEN:
        machine.open_block()
    elif token is CLOSE:
        block = machine.close_block()
        if machine.building:
            machine.append_pending(block)
        else:
            evaluate(block, machine)
    else:
        evaluate(token, machine)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("%-8s depth=%d %s", word, machine.depth, format_stack(machine.stack))


def process_line(text: str, machine):
    """Process every word of one line of source"""
    logger.debug("line: %r", text)
    for word in split_words(text):
        process_word(word, machine)


__all__ = ['evaluate', 'run_block', 'process_word', 'process_line']
