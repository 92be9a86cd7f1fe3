"""
Stack Runtime Errors

Every failure the interpreter can raise carries a stable error code so the
surrounding tooling can tell them apart without parsing messages.

All of these are fatal for the current evaluation: the core never catches
and continues, it only signals the specific failure kind.
"""


# ============================================================================
# Error Codes
# ============================================================================

E_TYPE_MISMATCH = "E_TYPE_MISMATCH"
E_STACK_UNDERFLOW = "E_STACK_UNDERFLOW"
E_UNDEFINED_NAME = "E_UNDEFINED_NAME"
E_MALFORMED_BLOCK = "E_MALFORMED_BLOCK"
E_UNTERMINATED_BLOCK = "E_UNTERMINATED_BLOCK"
E_DIVISION_BY_ZERO = "E_DIVISION_BY_ZERO"
E_INTEGER_OVERFLOW = "E_INTEGER_OVERFLOW"


# ============================================================================
# Exceptions
# ============================================================================

class StackError(Exception):
    """Base exception for stack runtime errors"""
    code = None

    def __init__(self, message: str, code: str = None):
        self.code = code or self.code
        self.message = message
        super().__init__(f"[{self.code}] {message}")


class TypeMismatch(StackError):
    """Operand is not the variant the operator expects"""
    code = E_TYPE_MISMATCH


class StackUnderflow(StackError):
    """Pop attempted on an empty operand stack"""
    code = E_STACK_UNDERFLOW


class UndefinedName(StackError):
    """Operator name has no binding"""
    code = E_UNDEFINED_NAME


class MalformedBlock(StackError):
    """Block-close marker with no matching open marker"""
    code = E_MALFORMED_BLOCK


class UnterminatedBlock(StackError):
    """Input ended while a block was still open"""
    code = E_UNTERMINATED_BLOCK


class DivisionByZero(StackError):
    code = E_DIVISION_BY_ZERO


class IntegerOverflow(StackError):
    """Result does not fit in a signed 32-bit integer"""
    code = E_INTEGER_OVERFLOW


__all__ = [
    'E_TYPE_MISMATCH', 'E_STACK_UNDERFLOW', 'E_UNDEFINED_NAME',
    'E_MALFORMED_BLOCK', 'E_UNTERMINATED_BLOCK', 'E_DIVISION_BY_ZERO',
    'E_INTEGER_OVERFLOW',
    'StackError', 'TypeMismatch', 'StackUnderflow', 'UndefinedName',
    'MalformedBlock', 'UnterminatedBlock', 'DivisionByZero', 'IntegerOverflow',
]
