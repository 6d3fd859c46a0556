class LispreterError(Exception):
    """ Base class for all Lispreter errors"""
    pass

class NodeInitError(LispreterError):
    """ Raised when an atom literal is malformed or a list cell has an ill-formed tail"""
    pass

class LispSyntaxError(LispreterError):
    """ Raised when the reader meets unbalanced or unexpected tokens"""

class FuncDefError(LispreterError):
    """ Raised when a function definition or a function call is malformed"""

class InvalidParameterError(FuncDefError):
    """ Raised when a formal parameter name is not a symbol literal"""

class DuplicateParameterError(FuncDefError):
    """ Raised when a formal parameter name is repeated"""

class InvalidActualsError(FuncDefError):
    """ Raised when the actual parameters are neither a list nor NIL"""

class ArityError(FuncDefError):
    """ Raised when the number of actuals does not match the formals"""

class TooFewArgumentsError(ArityError):
    """ Raised when a call supplies fewer actuals than formals"""

class TooManyArgumentsError(ArityError):
    """ Raised when a call supplies more actuals than formals"""

class LispEnvironmentError(LispreterError):
    """ Raised when a name is looked up before it is defined"""

class UndefinedFunctionError(LispEnvironmentError):
    """ Raised when a function is called before it is registered"""

class UndefinedVariableError(LispEnvironmentError):
    """ Raised when a variable is read or unbound before it is bound"""

class UndefinedLambdaError(LispEnvironmentError):
    """ Raised when a lambda is applied before it is registered"""

class EvaluationError(LispreterError):
    """ Raised when a form cannot be evaluated (bad special form usage, non-function head)"""

class PrimitiveError(LispreterError):
    """ Raised when a primitive receives the wrong number or type of arguments"""
