
class SigmaError(Exception):
    """ Base class for all Sigma errors"""
    pass

class SigmaSyntaxError(SigmaError):
    """ Raised when the source text does not match the grammar"""

class SigmaTypeError(SigmaError):
    """ Raised when an operand has the wrong kind of value for a form"""

class SigmaArityError(SigmaError):
    """ Raised when a fixed-arity form gets too few or too many operands"""

class SigmaUnboundSymbol(SigmaError):
    """ Raised when an identifier is not bound in any enclosing scope"""

class SigmaDepthError(SigmaError):
    """ Raised when expressions are nested deeper than the configured maximum"""

class SigmaInternalError(SigmaError):
    """ Raised when an internal invariant is violated (should be unreachable)"""
