"""
Stack Runtime Reader

Splits a line of source into whitespace-separated words and classifies each
word on its own, with no side effects:

    {        -> BLOCK_OPEN
    }        -> BLOCK_CLOSE
    -12      -> Number(-12)       (whole word is a signed 32-bit integer)
    /name    -> Symbol('name')
    anything -> Operator(word)    (looked up later, verbatim)

Classification never raises. A numeric literal that fails to parse (or does
not fit in 32 bits) falls through to Operator, and the bare word '/' stays the
division operator rather than becoming an empty-named Symbol.
"""

from typing import List, Optional, Union
import re

from .values import Number, Operator, Symbol, fits_int32


# ============================================================================
# Markers
# ============================================================================

BLOCK_OPEN = '{'
BLOCK_CLOSE = '}'
SYMBOL_MARKER = '/'


class Marker:
    """Block delimiter returned by classify()"""

    def __init__(self, text: str):
        self.text = text

    def __repr__(self) -> str:
        return f"Marker({self.text!r})"


OPEN = Marker(BLOCK_OPEN)
CLOSE = Marker(BLOCK_CLOSE)

_INTEGER_RE = re.compile(r'[+-]?[0-9]+\Z')


# ============================================================================
# Reader
# ============================================================================

def split_words(line: str) -> List[str]:
    """Split one line of source into words"""
    return line.split()


def parse_number(word: str) -> Optional[int]:
    """Parse a decimal signed 32-bit integer, or return None"""
    if not _INTEGER_RE.match(word):
        return None
    digits = word.lstrip('+-').lstrip('0') or '0'
    # more than 10 significant digits can never fit in 32 bits
    if len(digits) > 10:
        return None
    n = -int(digits) if word.startswith('-') else int(digits)
    if not fits_int32(n):
        return None
    return n


def classify(word: str) -> Union[Marker, Number, Symbol, Operator, None]:
    """
    Classify a single word.

    Returns None for the empty word so repeated or trailing separators are
    a no-op.
    """
    if not word:
        return None
    if word == BLOCK_OPEN:
        return OPEN
    if word == BLOCK_CLOSE:
        return CLOSE

    n = parse_number(word)
    if n is not None:
        return Number(n)

    if word.startswith(SYMBOL_MARKER) and len(word) > len(SYMBOL_MARKER):
        return Symbol(word[len(SYMBOL_MARKER):])

    return Operator(word)


__all__ = [
    'BLOCK_OPEN', 'BLOCK_CLOSE', 'SYMBOL_MARKER',
    'Marker', 'OPEN', 'CLOSE',
    'split_words', 'parse_number', 'classify',
]
