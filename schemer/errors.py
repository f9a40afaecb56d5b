class SchemerError(Exception):
    """ Base class for all schemer errors"""
    pass

class SchemerSyntaxError(SchemerError):
    """ Raised when source text cannot be read into an expression"""

class SchemerUnboundSymbol(SchemerError):
    """ Raised when an identifier has no binding in the environment"""

class SchemerMalformedFormError(SchemerError):
    """ Raised when quote, lambda or cond has the wrong shape"""

class SchemerTypeError(SchemerError):
    """ Raised when an operand is the wrong kind of expression"""

class SchemerArityError(SchemerError):
    """ Raised when the number of arguments passed to a function is incorrect"""

class SchemerArithmeticError(SchemerError):
    """ Raised when add1 or sub1 would leave the representable number range"""

class SchemerApplicationError(SchemerError):
    """ Raised when the head of an application is neither a primitive nor a closure"""

class SchemerRecursionError(SchemerError):
    """ Raised when evaluation nests deeper than the host interpreter allows"""
