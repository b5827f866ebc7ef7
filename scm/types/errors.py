

class ScmError(Exception):
    """ Base class for all scm errors"""
    pass

class ScmSyntaxError(ScmError):
    """ Raised when the reader meets malformed input"""

class ScmUnboundSymbol(ScmError):
    """ Raised when a symbol is looked up or set! before it is bound"""

class ScmArityError(ScmError):
    """ Raised when the number of arguments passed to a procedure or special form is incorrect"""

class ScmTypeError(ScmError):
    """ Raised when a value of the wrong kind is used"""

class ScmUnknownForm(ScmError):
    """ Raised when an expression or procedure kind reaches evaluation that no syntax can produce"""

class ScmRecursionError(ScmError):
    """ Raised when evaluation exhausts the host call stack"""
