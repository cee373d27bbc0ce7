from __future__ import annotations


class LumenError(Exception):
    """ Base class for all Lumen errors"""
    pass


class LumenSyntaxError(LumenError):
    """ Raised when source text cannot be read; carries the source position"""

    def __init__(self, message: str, line: int = 0, col: int = 0):
        super().__init__(f"{message} ({line}:{col})")
        self.message = message
        self.line = line
        self.col = col


class LumenLexError(LumenSyntaxError):
    """ Raised when the lexer meets a character it cannot classify"""


class LumenParseError(LumenSyntaxError):
    """ Raised when the parser meets an unexpected or missing token"""


class LumenUndefinedVariable(LumenError):
    """ Raised when a name is read, or assigned outside the global scope, before it is bound"""


class LumenTypeError(LumenError):
    """ Raised when an operand or call target has the wrong type"""


class LumenDivideByZero(LumenError):
    """ Raised when the right operand of / or % is zero"""


class LumenOverflowError(LumenError):
    """ Raised when a numeric result cannot be represented, e.g. a huge integer as a float"""
